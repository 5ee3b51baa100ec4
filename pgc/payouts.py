"""Earnings and points lookup from a tier's payout tables."""

from collections import Counter
from typing import Iterable, Optional, Tuple

from .constants import CUT
from .models import TeamResult, TierTable
from .positions import parse_position


def slice_tier(tier: TierTable, start: int, stop: Optional[int] = None) -> TierTable:
    """Return a view of ``tier`` covering ranks ``start`` to ``stop`` (0-based, exclusive)."""
    return TierTable(points=list(tier.points[start:stop]), payouts=list(tier.payouts[start:stop]))


def count_positions(teams: Iterable[TeamResult]) -> Counter:
    """Count how many teams hold each position string."""
    return Counter(team.position for team in teams if team.position)


def prize_for_position(
    position: Optional[str],
    tie_count: int,
    tier: TierTable,
) -> Tuple[float, float]:
    """
    Look up earnings and points for a finishing position.

    A plain rank N pays ``payouts[N-1]`` and ``points[N-1]`` (0 past the end
    of the table). A tied rank TN shared by ``tie_count`` teams splits the
    table entries N..N+tie_count-1 evenly. Only the entries that exist are
    summed, but the sum is still divided by the full ``tie_count``.

    Args:
        position: Position string ("4", "T4", "CUT")
        tie_count: Number of teams holding this exact position
        tier: Points and payouts tables

    Returns:
        Tuple of (earnings, points)
    """
    if position == CUT or not tier.points or not tier.payouts:
        return 0.0, 0.0

    rank, tied = parse_position(position)
    if rank is None or rank < 1:
        return 0.0, 0.0
    index = rank - 1

    if not tied:
        earnings = tier.payouts[index] if index < len(tier.payouts) else 0.0
        points = tier.points[index] if index < len(tier.points) else 0.0
        return float(earnings), float(points)

    if index >= len(tier.points) or index >= len(tier.payouts) or tie_count < 1:
        return 0.0, 0.0

    end = min(index + tie_count, len(tier.points), len(tier.payouts))
    earnings_total = sum(tier.payouts[index:end])
    points_total = sum(tier.points[index:end])

    return earnings_total / tie_count, points_total / tie_count


def compute_earnings_and_points(
    team: TeamResult,
    group_teams: Iterable[TeamResult],
    tier: TierTable,
) -> Tuple[float, float]:
    """
    Earnings and points for a team, splitting ties within ``group_teams``.

    Args:
        team: Team with its position already assigned
        group_teams: Teams competing for the same table (tie lookups)
        tier: Points and payouts tables

    Returns:
        Tuple of (earnings, points)
    """
    if team.position == CUT:
        return 0.0, 0.0

    tie_count = sum(1 for other in group_teams if other.position == team.position)
    return prize_for_position(team.position, tie_count, tier)
