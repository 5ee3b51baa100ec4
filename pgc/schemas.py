"""Pydantic schemas for JSON data validation."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_PAR,
    PLAYOFF_BRACKET_SIZE,
    PLAYOFF_SELECTION,
    TOUR_CHAMPIONSHIP,
    UNRANKED_POSITION,
)
from .models import Golfer, TeamResult, TierTable, TourCard

POSITION_PATTERN = r'^(CUT|T?\d+)$'


def _as_str_id(v):
    """Accept numeric ids from exports and store them as strings."""
    if isinstance(v, int):
        return str(v)
    return v


class TierRecord(BaseModel):
    """Points and payout tables for a tier."""

    name: str | None = None
    points: list[float] = Field(default_factory=list)
    payouts: list[float] = Field(default_factory=list)

    class Config:
        extra = 'forbid'

    def to_model(self) -> TierTable:
        return TierTable(points=list(self.points), payouts=list(self.payouts))


class TourCardRecord(BaseModel):
    """Tour card in a tournament or season file."""

    id: str = Field(..., min_length=1)
    tour_id: str = Field(..., min_length=1)
    display_name: str = ''
    playoff: int | None = Field(None, ge=0, le=2)
    position: str | None = Field(None, pattern=POSITION_PATTERN)
    earnings: float = 0.0
    points: float = 0.0
    appearances: int = Field(0, ge=0)
    made_cut: int = Field(0, ge=0)

    @field_validator('id', 'tour_id', mode='before')
    @classmethod
    def coerce_ids(cls, v):
        """Accept numeric ids from database exports."""
        return _as_str_id(v)

    class Config:
        extra = 'forbid'

    def to_model(self) -> TourCard:
        return TourCard(**self.model_dump())


class GolferRecord(BaseModel):
    """Golfer leaderboard line."""

    api_id: int
    player_name: str = ''
    position: str | None = None
    round_one: float | None = None
    round_two: float | None = None
    round_three: float | None = None
    round_four: float | None = None
    today: float | None = None
    thru: int | None = Field(None, ge=0, le=18)
    round: int | None = Field(None, ge=1, le=5)

    class Config:
        extra = 'ignore'

    def to_model(self) -> Golfer:
        return Golfer(**self.model_dump())


class TeamRecord(BaseModel):
    """Team result row."""

    id: str = Field(..., min_length=1)
    tour_card_id: str = Field(..., min_length=1)
    score: float | None = None
    position: str | None = Field(None, pattern=POSITION_PATTERN)
    past_position: str | None = Field(None, pattern=POSITION_PATTERN)
    earnings: float = 0.0
    points: float = 0.0
    today: float | None = None
    thru: float | None = None
    round: int | None = Field(None, ge=1, le=5)
    golfer_ids: list[int] = Field(default_factory=list)
    round_one: float | None = None
    round_two: float | None = None
    round_three: float | None = None
    round_four: float | None = None

    @field_validator('id', 'tour_card_id', mode='before')
    @classmethod
    def coerce_ids(cls, v):
        """Accept numeric ids from database exports."""
        return _as_str_id(v)

    class Config:
        extra = 'forbid'

    def to_model(self) -> TeamResult:
        return TeamResult(**self.model_dump())


class TournamentFile(BaseModel):
    """Complete tournament snapshot file structure."""

    name: str = Field(..., min_length=1)
    tier_name: str = ''
    par: int | None = Field(None, ge=54, le=80)
    tier: TierRecord | None = None
    tour_cards: list[TourCardRecord] = Field(default_factory=list)
    teams: list[TeamRecord] = Field(default_factory=list)
    golfers: list[GolferRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class PlayoffEventRecord(BaseModel):
    """One event of the playoff series."""

    name: str = Field(..., min_length=1)
    par: int | None = Field(None, ge=54, le=80)
    teams: list[TeamRecord] = Field(default_factory=list)
    golfers: list[GolferRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class PlayoffSeriesFile(BaseModel):
    """Complete playoff series file structure."""

    tier: TierRecord | None = None
    tour_cards: list[TourCardRecord] = Field(default_factory=list)
    events: list[PlayoffEventRecord] = Field(..., min_length=1, max_length=3)

    class Config:
        extra = 'forbid'


class SeasonFile(BaseModel):
    """Season file: tour cards plus every team result of the season."""

    tour_cards: list[TourCardRecord] = Field(default_factory=list)
    teams: list[TeamRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """League configuration settings."""

    tour_championship_name: str = TOUR_CHAMPIONSHIP
    playoff_bracket_size: int = Field(PLAYOFF_BRACKET_SIZE, ge=1)
    unranked_position: str | None = UNRANKED_POSITION
    rank_scope: Literal['field', 'tour'] = 'field'
    default_par: int = Field(DEFAULT_PAR, ge=54, le=80)
    playoff_selection: dict[int, list[int]] = Field(
        default_factory=lambda: {k: list(v) for k, v in PLAYOFF_SELECTION.items()}
    )

    @field_validator('playoff_selection')
    @classmethod
    def validate_selection(cls, v):
        """Ensure every event lists a positive golfer count for all four rounds."""
        for event, counts in v.items():
            if event not in (1, 2, 3):
                raise ValueError(f'Invalid playoff event index: {event}')
            if len(counts) != 4:
                raise ValueError(f'Event {event} needs 4 round counts, got {len(counts)}')
            if any(c < 1 for c in counts):
                raise ValueError(f'Event {event} has a non-positive golfer count: {counts}')
        return v

    @field_validator('unranked_position')
    @classmethod
    def validate_unranked_position(cls, v):
        """Fallback must look like a position string when set."""
        if v is not None and not (v.lstrip('T').isdigit()):
            raise ValueError(f'Invalid fallback position: {v}')
        return v

    class Config:
        extra = 'forbid'
