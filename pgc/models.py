"""Data models for the PGC Tour standings calculator."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TierTable:
    """Points and payouts by finishing rank (index 0 = 1st place)."""
    points: List[float] = field(default_factory=list)
    payouts: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class TourCard:
    """A member's entry on one tour for one season."""
    id: str
    tour_id: str
    display_name: str = ''
    playoff: Optional[int] = None  # 0/None regular, 1 gold, 2 silver
    position: Optional[str] = None  # season standing, e.g. "T4"
    earnings: float = 0.0
    points: float = 0.0
    appearances: int = 0
    made_cut: int = 0


@dataclass(frozen=True)
class Golfer:
    """A golfer's line on the tournament leaderboard."""
    api_id: int
    player_name: str = ''
    position: Optional[str] = None
    round_one: Optional[float] = None
    round_two: Optional[float] = None
    round_three: Optional[float] = None
    round_four: Optional[float] = None
    today: Optional[float] = None
    thru: Optional[int] = None
    round: Optional[int] = None


@dataclass(frozen=True)
class TeamResult:
    """One team's result in one tournament."""
    id: str
    tour_card_id: str
    score: Optional[float] = None
    position: Optional[str] = None
    past_position: Optional[str] = None
    earnings: float = 0.0
    points: float = 0.0
    today: Optional[float] = None
    thru: Optional[float] = None
    round: Optional[int] = None
    golfer_ids: List[int] = field(default_factory=list)
    round_one: Optional[float] = None
    round_two: Optional[float] = None
    round_three: Optional[float] = None
    round_four: Optional[float] = None


@dataclass(frozen=True)
class PlayoffEvent:
    """One event of the playoff series with its leaderboard."""
    name: str
    par: int
    teams: List[TeamResult] = field(default_factory=list)
    golfers: List[Golfer] = field(default_factory=list)


@dataclass(frozen=True)
class Tournament:
    """Snapshot of a tournament: tier tables, tour cards, teams and leaderboard."""
    name: str
    tier: Optional[TierTable] = None
    tier_name: str = ''
    par: int = 72
    tour_cards: List[TourCard] = field(default_factory=list)
    teams: List[TeamResult] = field(default_factory=list)
    golfers: List[Golfer] = field(default_factory=list)
