"""
Bye removal for brackets whose player count is not a power of two.

The builder always produces a full tree. Every seed rank above the real
player count is a phantom participant; matches against phantoms are
walkovers and matches between two phantoms never happen. Removing them
changes neighbouring matches, which may create new walkovers, so the passes
repeat until nothing changes.
"""
import logging
from typing import Dict, Iterable, List, Set

from knockout.errors import BracketInvariantError
from knockout.models import Advance, BracketNode, FromMatch, Rank, Seed, Slot, UNUSED

logger = logging.getLogger(__name__)


def collapse_byes(nodes: Iterable[BracketNode], num_players: int) -> List[BracketNode]:
    """Remove all bye matches from `nodes` (modified in place) and return the survivors."""
    return ByeCollapser(nodes, num_players).run()


class ByeCollapser:
    def __init__(self, nodes: Iterable[BracketNode], num_players: int):
        self.num_players = num_players
        self.nodes: Dict[int, BracketNode] = {node.id: node for node in nodes}
        self.deleted: Set[int] = set()

    def run(self) -> List[BracketNode]:
        iteration = 0
        changed = True
        while changed:
            iteration += 1
            changed = self.remove_double_byes()
            changed = self.resolve_single_byes() or changed
            logger.debug("Bye collapse iteration %d: %d matches left, changed=%s",
                         iteration, len(self.nodes), changed)
        return self.ordered()

    def ordered(self) -> List[BracketNode]:
        """Earliest rounds first; promotions then cascade towards the final."""
        return sorted(self.nodes.values(), key=lambda n: (-n.depth, n.id))

    def is_phantom(self, slot: Slot) -> bool:
        if isinstance(slot, Seed):
            return slot.rank > self.num_players
        return slot == UNUSED

    def remove_double_byes(self) -> bool:
        """Delete matches without any real participant."""
        changed = False
        for node in self.ordered():
            if node.id in self.deleted:
                continue
            if not (self.is_phantom(node.slot1) and self.is_phantom(node.slot2)):
                continue

            for target in (node.winner_target, node.loser_target):
                if isinstance(target, Advance):
                    self.get(target.match_id).set_slot(target.slot, UNUSED)
            self.delete(node)
            changed = True

        self.compact()
        return changed

    def resolve_single_byes(self) -> bool:
        """Promote the only real participant of a walkover match."""
        changed = False
        for node in self.ordered():
            if node.id in self.deleted:
                continue

            phantom1 = self.is_phantom(node.slot1)
            phantom2 = self.is_phantom(node.slot2)
            if phantom1 == phantom2:
                continue

            phantom_index = 1 if phantom1 else 2
            survivor = node.slot2 if phantom1 else node.slot1

            if isinstance(node.winner_target, Rank):
                # Kept: it is the only record of the survivor's final rank.
                if node.get_slot(phantom_index) != UNUSED:
                    node.set_slot(phantom_index, UNUSED)
                    changed = True
                if isinstance(node.loser_target, Advance):
                    self.get(node.loser_target.match_id).set_slot(node.loser_target.slot, UNUSED)
                    node.loser_target = None
                    changed = True
                continue

            winner_target = node.winner_target
            if isinstance(winner_target, Advance):
                next_node = self.get(winner_target.match_id)
                next_node.set_slot(winner_target.slot, survivor)
                if isinstance(survivor, FromMatch):
                    self.splice(self.get(survivor.match_id), node, next_node, winner_target.slot)

            if isinstance(node.loser_target, Advance):
                self.get(node.loser_target.match_id).set_slot(node.loser_target.slot, UNUSED)

            self.delete(node)
            changed = True

        self.compact()
        return changed

    def splice(self, prev: BracketNode, removed: BracketNode, next_node: BracketNode, slot: int):
        """Re-link `prev`, which fed `removed`, directly to `next_node`."""
        if isinstance(prev.winner_target, Advance) and prev.winner_target.match_id == removed.id:
            prev.link_winner_to(next_node, slot)
        elif isinstance(prev.loser_target, Advance) and prev.loser_target.match_id == removed.id:
            prev.link_loser_to(next_node, slot)
        else:
            raise BracketInvariantError(
                f"Match {prev.id} is referenced by match {removed.id} but does not advance to it")
        logger.debug("Spliced match %d past match %d into match %d, slot %d",
                     prev.id, removed.id, next_node.id, slot)

    def get(self, match_id: int) -> BracketNode:
        node = self.nodes.get(match_id)
        if node is None or match_id in self.deleted:
            raise BracketInvariantError(f"Match {match_id} is referenced but no longer exists")
        return node

    def delete(self, node: BracketNode):
        logger.debug("Removing bye match %d (%s vs %s)", node.id, node.slot1, node.slot2)
        self.deleted.add(node.id)

    def compact(self):
        for match_id in self.deleted:
            del self.nodes[match_id]
        self.deleted.clear()
