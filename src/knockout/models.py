"""
Bracket node data model.

A bracket is a flat list of BracketNode objects. Each node is one match slot;
its two participant slots say where the players come from and its two
targets say where the winner and the loser go afterwards.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class Seed:
    """A directly seeded participant (1 = top seed)."""
    rank: int


@dataclass(frozen=True)
class FromMatch:
    """The winner or loser of another match; the other match's targets say which."""
    match_id: int


@dataclass(frozen=True)
class Unused:
    """A slot that will never be filled."""


UNUSED = Unused()


@dataclass(frozen=True)
class Advance:
    """Proceed to slot `slot` of match `match_id`."""
    match_id: int
    slot: int


@dataclass(frozen=True)
class Rank:
    """Terminal placement, no further match."""
    rank: int


Slot = Union[Seed, FromMatch, Unused]
Target = Optional[Union[Advance, Rank]]


class MatchIdGenerator:
    """Hands out match ids 1, 2, 3, ... for one generation run."""

    def __init__(self, start: int = 1):
        self._next_id = start

    def __call__(self) -> int:
        match_id = self._next_id
        self._next_id += 1
        return match_id

    def __repr__(self):
        return f"MatchIdGenerator(next_id={self._next_id})"


class BracketNode:
    def __init__(self, match_id: int, depth: int = 0, slot1: Slot = UNUSED, slot2: Slot = UNUSED,
                 winner_target: Target = None, loser_target: Target = None):
        self.id = match_id
        self.depth = depth
        self.slot1 = slot1
        self.slot2 = slot2
        self.winner_target = winner_target
        self.loser_target = loser_target

    @classmethod
    def create(cls, id_gen: MatchIdGenerator, depth: int, rank1: int, rank2: int) -> 'BracketNode':
        """Create a node with a fresh id and two direct seeds."""
        return cls(id_gen(), depth, Seed(rank1), Seed(rank2))

    def get_slot(self, index: int) -> Slot:
        _check_slot_index(index)
        return self.slot1 if index == 1 else self.slot2

    def set_slot(self, index: int, value: Slot):
        _check_slot_index(index)
        if index == 1:
            self.slot1 = value
        else:
            self.slot2 = value

    def link_winner_to(self, other: 'BracketNode', slot_index: int):
        """Send this match's winner to `other` and record the back-reference there."""
        _check_slot_index(slot_index)
        self.winner_target = Advance(other.id, slot_index)
        other.set_slot(slot_index, FromMatch(self.id))

    def link_loser_to(self, other: 'BracketNode', slot_index: int):
        """Send this match's loser to `other` and record the back-reference there."""
        _check_slot_index(slot_index)
        self.loser_target = Advance(other.id, slot_index)
        other.set_slot(slot_index, FromMatch(self.id))

    def seeds(self) -> List[int]:
        """Direct seed ranks in slot order; placeholder and unused slots are skipped."""
        return [s.rank for s in (self.slot1, self.slot2) if isinstance(s, Seed)]

    @property
    def is_walkover(self) -> bool:
        """True for a kept terminal match that only ever has one participant."""
        return (self.slot1 == UNUSED) != (self.slot2 == UNUSED)

    def copy(self) -> 'BracketNode':
        return BracketNode(self.id, self.depth, self.slot1, self.slot2,
                           self.winner_target, self.loser_target)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'depth': self.depth,
            'slots': [_slot_to_dict(self.slot1), _slot_to_dict(self.slot2)],
            'winner': _target_to_dict(self.winner_target),
            'loser': _target_to_dict(self.loser_target),
        }

    def __eq__(self, other):
        if not isinstance(other, BracketNode):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        return (f"BracketNode(id={self.id}, depth={self.depth}, slot1={self.slot1}, slot2={self.slot2}, "
                f"winner_target={self.winner_target}, loser_target={self.loser_target})")


def _check_slot_index(index: int):
    if index not in (1, 2):
        raise ValueError(f"Slot index must be 1 or 2, got {index}")


def _slot_to_dict(slot: Slot) -> Dict:
    if isinstance(slot, Seed):
        return {'type': 'seed', 'rank': slot.rank}
    if isinstance(slot, FromMatch):
        return {'type': 'match', 'match_id': slot.match_id}
    return {'type': 'unused'}


def _target_to_dict(target: Target) -> Optional[Dict]:
    if isinstance(target, Advance):
        return {'type': 'advance', 'match_id': target.match_id, 'slot': target.slot}
    if isinstance(target, Rank):
        return {'type': 'rank', 'rank': target.rank}
    return None
