"""
Single elimination tree construction.

The tree is grown from the final outward: each round of the previous
iteration is split into two matches, so a bracket for P players (P a power
of two) ends up with P - 1 matches plus the match for third place.
"""
import logging
from typing import List, Optional

from knockout.collapser import collapse_byes
from knockout.models import BracketNode, MatchIdGenerator, Rank

logger = logging.getLogger(__name__)


def build_bracket_tree(num_players: int, id_gen: Optional[MatchIdGenerator] = None,
                       third_place: bool = True) -> List[BracketNode]:
    """
    Build the complete, uncollapsed tree for the next power of two >= num_players.

    Seeding rule: the seed ranks of every match in a round of n players sum
    to n + 1 (final 1v2, semifinals 1v4 and 2v3, quarterfinals 1v8, 4v5,
    2v7, 3v6). Splitting each match into (r1, n+1-r1) and (r2, n+1-r2)
    keeps the halves of the draw together.

    Returns an empty list for fewer than two players.
    """
    if num_players < 2:
        return []

    if id_gen is None:
        id_gen = MatchIdGenerator()

    final = BracketNode.create(id_gen, 0, 1, 2)
    final.winner_target = Rank(1)
    final.loser_target = Rank(2)
    nodes = [final]

    # Not part of the splitting loop below, so it stays out of `nodes` until
    # the semifinals exist.
    third_place_node = BracketNode.create(id_gen, 0, 3, 4)
    third_place_node.winner_target = Rank(3)
    third_place_node.loser_target = Rank(4)

    bracket_size = 2
    depth = 0
    while bracket_size < num_players:
        bracket_size *= 2
        depth += 1

        previous_round = [n for n in nodes if n.depth == depth - 1]
        for parent in previous_round:
            rank1, rank2 = parent.slot1.rank, parent.slot2.rank

            child1 = BracketNode.create(id_gen, depth, rank1, bracket_size + 1 - rank1)
            child1.link_winner_to(parent, 1)

            child2 = BracketNode.create(id_gen, depth, rank2, bracket_size + 1 - rank2)
            child2.link_winner_to(parent, 2)

            if depth == 1 and third_place:
                child1.link_loser_to(third_place_node, 1)
                child2.link_loser_to(third_place_node, 2)
                nodes.append(third_place_node)

            nodes.append(child1)
            nodes.append(child2)

    logger.debug("Built bracket tree for %d players: size %d, %d matches",
                 num_players, bracket_size, len(nodes))
    return nodes


class BracketTreeBuilder:
    """Builds a single elimination bracket and collapses its byes."""

    def __init__(self, num_players: int, third_place: bool = True):
        self.num_players = num_players
        self.third_place = third_place
        self.id_gen = MatchIdGenerator()

    def build_tree(self) -> List[BracketNode]:
        """The full power-of-two tree, before byes are removed."""
        self.id_gen = MatchIdGenerator()
        return build_bracket_tree(self.num_players, self.id_gen, self.third_place)

    def build(self) -> List[BracketNode]:
        return collapse_byes(self.build_tree(), self.num_players)
