"""Constants and lookup tables for the PGC Tour standings calculator."""

# Position literal for teams that missed the cut
CUT = 'CUT'

# Prefix marking a shared (tied) position, e.g. "T4"
TIE_PREFIX = 'T'

# Season-ending event where the gold and silver brackets are scored separately
TOUR_CHAMPIONSHIP = 'TOUR Championship'

# Tour card playoff flag for the silver bracket (1 is gold, 0 or None regular)
PLAYOFF_SILVER = 2

# Number of tier table slots per playoff bracket (gold 0-74, silver 75-149)
PLAYOFF_BRACKET_SIZE = 75

# Position handed to teams that could not be ranked (no score)
UNRANKED_POSITION = '1'

DEFAULT_PAR = 72

# Placeholder strokes used to push unplayed rounds to the back when ordering
MISSING_ROUND_STROKES = 100

# Best-N golfers counted per round, by playoff event index (1-3)
PLAYOFF_SELECTION = {
    1: (10, 10, 5, 5),
    2: (5, 5, 5, 5),
    3: (3, 3, 3, 3),
}

ROUND_FIELDS = ('round_one', 'round_two', 'round_three', 'round_four')
