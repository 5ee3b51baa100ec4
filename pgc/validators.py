"""Validation functions for tier tables and tournament results."""

import re
from collections import Counter
from typing import Iterable, Optional

from .constants import PLAYOFF_BRACKET_SIZE, TOUR_CHAMPIONSHIP
from .models import TeamResult, TierTable, TourCard
from .schemas import POSITION_PATTERN

POSITION_RE = re.compile(POSITION_PATTERN)


def validate_tier_table(tier: TierTable) -> list[str]:
    """
    Check that a tier's tables are usable for payouts.

    Checks:
    - Points and payouts tables have the same length
    - Neither table increases from one rank to the next
    - No negative payouts

    Args:
        tier: TierTable to validate

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if len(tier.points) != len(tier.payouts):
        warnings.append(
            f'Tier has {len(tier.points)} points entries but {len(tier.payouts)} payouts entries'
        )

    for label, table in (('points', tier.points), ('payouts', tier.payouts)):
        for rank, (value, following) in enumerate(zip(table, table[1:]), start=1):
            if following > value:
                warnings.append(
                    f'Tier {label} increase from rank {rank} ({value}) to rank {rank + 1} ({following})'
                )
                break

    negative = [value for value in tier.payouts if value < 0]
    if negative:
        warnings.append(f'Tier has {len(negative)} negative payouts')

    return warnings


def validate_championship_tier(
    tier: TierTable, bracket_size: int = PLAYOFF_BRACKET_SIZE
) -> list[str]:
    """Warn when a championship tier cannot cover both the gold and silver brackets."""
    warnings = []
    needed = bracket_size * 2
    for label, table in (('points', tier.points), ('payouts', tier.payouts)):
        if len(table) <= bracket_size:
            warnings.append(
                f'Championship tier {label} has {len(table)} entries; silver bracket starts at {bracket_size}'
            )
        elif len(table) < needed:
            warnings.append(
                f'Championship tier {label} has {len(table)} entries (expected {needed})'
            )
    return warnings


def validate_team_results(
    teams: Iterable[TeamResult], tour_cards: Iterable[TourCard]
) -> tuple[list[str], list[str]]:
    """
    Check a tournament's team results against its tour cards.

    Checks:
    - Team ids are unique (errors)
    - Every team belongs to a known tour card (errors)
    - One team per tour card (warnings)
    - Positions look like "CUT", "N" or "TN" (warnings)

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []
    teams = list(teams)
    card_ids = {card.id for card in tour_cards}

    duplicates = sorted(team_id for team_id, n in Counter(t.id for t in teams).items() if n > 1)
    if duplicates:
        errors.append(f'Duplicate team ids: {", ".join(duplicates)}')

    for team in teams:
        if team.tour_card_id not in card_ids:
            errors.append(f'Team {team.id} has unknown tour card {team.tour_card_id}')
        if team.position is not None and not POSITION_RE.match(team.position):
            warnings.append(f'Team {team.id} has malformed position {team.position!r}')

    repeated = sorted(card for card, n in Counter(t.tour_card_id for t in teams).items() if n > 1)
    if repeated:
        warnings.append(f'Tour cards with more than one team: {", ".join(repeated)}')

    return errors, warnings


def validate_tournament(
    teams: Iterable[TeamResult],
    tour_cards: Iterable[TourCard],
    tier: Optional[TierTable],
    tournament_name: Optional[str] = None,
    championship_name: str = TOUR_CHAMPIONSHIP,
    bracket_size: int = PLAYOFF_BRACKET_SIZE,
) -> tuple[list[str], list[str]]:
    """
    Validate everything the standings update will read for a tournament.

    Returns:
        Tuple of (errors, warnings)
        - errors: Critical issues that should stop the update
        - warnings: Issues to review but not block the update
    """
    errors, warnings = validate_team_results(teams, tour_cards)

    if tier is None:
        warnings.append('No tier found; positions, earnings and points will not be updated')
        return errors, warnings

    warnings.extend(validate_tier_table(tier))
    if tournament_name == championship_name:
        warnings.extend(validate_championship_tier(tier, bracket_size))

    return errors, warnings
