"""
Fixed 16-player ranking bracket.

Every place from 1 to 16 is played out: losers of each round drop into
placement matches instead of leaving the tournament. The layout is a static
table; byes for fewer than 16 players are removed with the same collapser
used for single elimination.
"""
import logging
from typing import List

from knockout.collapser import collapse_byes
from knockout.models import Advance, BracketNode, FromMatch, Rank, Seed

logger = logging.getLogger(__name__)

TEMPLATE_MAX_PLAYERS = 16

# (slot1, slot2, winner_to, loser_to, winner_slot, loser_slot, depth)
# Positive slot values are seed ranks, negative values are "from match N".
# Positive targets are match numbers, negative targets are final ranks.
RANKING_16_TABLE = [
    (1, 16, 10, 9, 1, 1, 4),         # Match 1
    (8, 9, 10, 9, 2, 2, 4),          # Match 2
    (4, 13, 12, 11, 1, 1, 4),        # Match 3
    (5, 12, 12, 11, 2, 2, 4),        # Match 4
    (11, 6, 14, 13, 1, 1, 4),        # Match 5
    (14, 3, 14, 13, 2, 2, 4),        # Match 6
    (10, 7, 16, 15, 1, 1, 4),        # Match 7
    (15, 2, 16, 15, 2, 2, 4),        # Match 8

    (-1, -2, 17, 21, 1, 1, 3),       # Match 9
    (-1, -2, 27, 19, 1, 2, 3),       # Match 10
    (-3, -4, 18, 22, 1, 1, 3),       # Match 11
    (-3, -4, 27, 20, 2, 2, 3),       # Match 12
    (-5, -6, 19, 21, 1, 2, 3),       # Match 13
    (-5, -6, 28, 17, 1, 2, 3),       # Match 14
    (-7, -8, 20, 22, 1, 2, 3),       # Match 15
    (-7, -8, 28, 18, 2, 2, 3),       # Match 16

    (-9, -14, 25, 23, 1, 1, 2),      # Match 17
    (-11, -16, 25, 24, 2, 1, 2),     # Match 18
    (-13, -10, 26, 23, 1, 2, 2),     # Match 19
    (-15, -12, 26, 24, 2, 2, 2),     # Match 20

    (-9, -13, 30, 29, 1, 1, 1),      # Match 21
    (-11, -15, 30, 29, 2, 2, 1),     # Match 22
    (-17, -19, 32, 31, 1, 1, 1),     # Match 23
    (-18, -20, 32, 31, 2, 2, 1),     # Match 24
    (-17, -18, 34, 33, 1, 1, 1),     # Match 25
    (-19, -20, 34, 33, 2, 2, 1),     # Match 26
    (-10, -12, 36, 35, 1, 1, 1),     # Match 27
    (-14, -16, 36, 35, 2, 2, 1),     # Match 28

    (-21, -22, -15, -16, 0, 0, 0),   # Match 29
    (-21, -22, -13, -14, 0, 0, 0),   # Match 30
    (-23, -24, -11, -12, 0, 0, 0),   # Match 31
    (-23, -24, -9, -10, 0, 0, 0),    # Match 32
    (-25, -26, -7, -8, 0, 0, 0),     # Match 33
    (-25, -26, -5, -6, 0, 0, 0),     # Match 34
    (-27, -28, -3, -4, 0, 0, 0),     # Match 35
    (-27, -28, -1, -2, 0, 0, 0),     # Match 36
]


def _slot_from_table(value: int):
    if value < 0:
        return FromMatch(-value)
    return Seed(value)


def _target_from_table(value: int, slot: int):
    if value < 0:
        return Rank(-value)
    return Advance(value, slot)


def build_template_tree() -> List[BracketNode]:
    """All 36 matches of the full 16-player ranking bracket, before byes are removed.

    Match ids are the table row numbers, which the table itself refers to.
    """
    nodes = []
    rows = enumerate(RANKING_16_TABLE, start=1)
    for match_id, (slot1, slot2, winner_to, loser_to, winner_slot, loser_slot, depth) in rows:
        nodes.append(BracketNode(
            match_id,
            depth,
            _slot_from_table(slot1),
            _slot_from_table(slot2),
            _target_from_table(winner_to, winner_slot),
            _target_from_table(loser_to, loser_slot),
        ))
    return nodes


def generate_template_bracket(num_players: int) -> List[BracketNode]:
    """Ranking bracket for 2 to 16 players; an empty list outside that range."""
    if num_players < 2 or num_players > TEMPLATE_MAX_PLAYERS:
        return []

    nodes = build_template_tree()
    logger.debug("Built 16-player template with %d matches for %d players", len(nodes), num_players)
    return collapse_byes(nodes, num_players)
