"""
Application constants for the League Dashboard backend

Static lookup tables for ESPN football ids and lineup ordering.
Runtime settings live in config.py.
"""

# Fallback for team ids missing from the week's team list
UNKNOWN_TEAM_NAME = "Unknown"

# Rostered slots that do not count toward the starting lineup
BENCH_SLOT = "Bench"
IR_SLOT = "IR"
NON_STARTER_SLOTS = frozenset({BENCH_SLOT, IR_SLOT})

# Display order of rostered slots; unknown slots sort with the bench
SLOT_PRIORITY = {
    'QB': 1,
    'RB': 2,
    'WR': 3,
    'TE': 4,
    'FLEX': 5,
    'RB/WR/TE': 5,
    'D/ST': 6,
    'K': 7,
    BENCH_SLOT: 99,
    IR_SLOT: 100,
}
DEFAULT_SLOT_PRIORITY = 99

# ESPN lineupSlotId -> rostered slot
LINEUP_SLOTS = {
    0: 'QB',
    1: 'TQB',
    2: 'RB',
    3: 'RB/WR',
    4: 'WR',
    5: 'WR/TE',
    6: 'TE',
    7: 'OP',
    8: 'DT',
    9: 'DE',
    10: 'LB',
    11: 'DL',
    12: 'CB',
    13: 'S',
    14: 'DB',
    15: 'DP',
    16: 'D/ST',
    17: 'K',
    18: 'P',
    19: 'HC',
    20: BENCH_SLOT,
    21: IR_SLOT,
    23: 'RB/WR/TE',
    24: 'ER',
}

# ESPN defaultPositionId -> natural position
DEFAULT_POSITIONS = {
    1: 'QB',
    2: 'RB',
    3: 'WR',
    4: 'TE',
    5: 'K',
    7: 'P',
    9: 'DT',
    10: 'DE',
    11: 'LB',
    12: 'CB',
    13: 'S',
    14: 'HC',
    16: 'D/ST',
}

# ESPN proTeamId -> NFL abbreviation
PRO_TEAMS = {
    0: 'FA',
    1: 'ATL',
    2: 'BUF',
    3: 'CHI',
    4: 'CIN',
    5: 'CLE',
    6: 'DAL',
    7: 'DEN',
    8: 'DET',
    9: 'GB',
    10: 'TEN',
    11: 'IND',
    12: 'KC',
    13: 'LV',
    14: 'LAR',
    15: 'MIA',
    16: 'MIN',
    17: 'NE',
    18: 'NO',
    19: 'NYG',
    20: 'NYJ',
    21: 'PHI',
    22: 'ARI',
    23: 'PIT',
    24: 'LAC',
    25: 'SF',
    26: 'SEA',
    27: 'TB',
    28: 'WSH',
    29: 'CAR',
    30: 'JAX',
    33: 'BAL',
    34: 'HOU',
}

# ESPN statSourceId of projected stats entries
PROJECTED_STAT_SOURCE = 1
