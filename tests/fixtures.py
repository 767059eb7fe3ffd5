"""
Test fixtures for friendgraph.

This module provides sample relationship data, as edge lists and as
edge-list file content, shared by the test modules.
"""

# Two friend groups with no connection between them
FRIEND_NODES = ["Ada", "Grace", "Eve", "Mary", "Lina"]
FRIEND_EDGES = [
    ("Ada", "Grace"),
    ("Ada", "Eve"),
    ("Grace", "Eve"),
    ("Mary", "Lina"),
]

# A simple chain A - B - C - D
CHAIN_EDGES = [("A", "B"), ("B", "C"), ("C", "D")]

# A 3x3 grid; opposite corners are 4 edges apart through several routes
GRID_EDGES = [
    ("g00", "g01"), ("g01", "g02"),
    ("g10", "g11"), ("g11", "g12"),
    ("g20", "g21"), ("g21", "g22"),
    ("g00", "g10"), ("g10", "g20"),
    ("g01", "g11"), ("g11", "g21"),
    ("g02", "g12"), ("g12", "g22"),
]

FRIENDS_FILE = """\
# Friendships
Ada Grace
Ada Eve
Grace Eve   # trailing comment

Mary Lina
Nobody
"""

MALFORMED_FILE = """\
Ada Grace
Ada Grace Eve
"""

# Names that look like rich console markup
BRACKETED_FILE = """\
Ada [/admin]
Bob [ops]
"""
