"""
Unit tests for the bracket data model.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from knockout.models import (
    UNUSED,
    Advance,
    BracketNode,
    FromMatch,
    MatchIdGenerator,
    Rank,
    Seed,
    Unused,
)


class TestSlotAndTargetValues:
    """Tests for the slot and target variants."""

    def test_variants_compare_by_type(self):
        """A seed rank and a match id with the same number are different slots."""
        assert Seed(3) != FromMatch(3)
        assert Rank(1) != Seed(1)
        assert Advance(4, 1) != Advance(4, 2)

    def test_variants_compare_by_value(self):
        assert Seed(5) == Seed(5)
        assert FromMatch(2) == FromMatch(2)
        assert Unused() == UNUSED

    def test_variants_are_immutable(self):
        with pytest.raises(AttributeError):
            Seed(1).rank = 2


class TestMatchIdGenerator:
    """Tests for per-run match ids."""

    def test_ids_start_at_one(self):
        id_gen = MatchIdGenerator()
        assert [id_gen(), id_gen(), id_gen()] == [1, 2, 3]

    def test_generators_are_independent(self):
        first = MatchIdGenerator()
        second = MatchIdGenerator()
        first()
        first()
        assert second() == 1
        assert first() == 3

    def test_custom_start(self):
        assert MatchIdGenerator(start=10)() == 10


class TestBracketNode:
    """Tests for BracketNode linking and accessors."""

    def test_create_assigns_id_and_seeds(self):
        id_gen = MatchIdGenerator()
        node = BracketNode.create(id_gen, 2, 1, 8)
        assert node.id == 1
        assert node.depth == 2
        assert node.slot1 == Seed(1)
        assert node.slot2 == Seed(8)
        assert node.winner_target is None
        assert node.loser_target is None

    def test_link_winner_sets_both_ends(self):
        id_gen = MatchIdGenerator()
        final = BracketNode.create(id_gen, 0, 1, 2)
        semi = BracketNode.create(id_gen, 1, 2, 3)

        semi.link_winner_to(final, 2)

        assert semi.winner_target == Advance(final.id, 2)
        assert final.slot2 == FromMatch(semi.id)
        assert final.slot1 == Seed(1)
        assert semi.loser_target is None

    def test_link_loser_sets_both_ends(self):
        id_gen = MatchIdGenerator()
        third = BracketNode.create(id_gen, 0, 3, 4)
        semi = BracketNode.create(id_gen, 1, 1, 4)

        semi.link_loser_to(third, 1)

        assert semi.loser_target == Advance(third.id, 1)
        assert third.slot1 == FromMatch(semi.id)
        assert semi.winner_target is None

    @pytest.mark.parametrize("index", [0, 3, -1])
    def test_invalid_slot_index(self, index):
        id_gen = MatchIdGenerator()
        a = BracketNode.create(id_gen, 0, 1, 2)
        b = BracketNode.create(id_gen, 1, 1, 4)
        with pytest.raises(ValueError):
            b.link_winner_to(a, index)
        with pytest.raises(ValueError):
            a.get_slot(index)

    def test_seeds_skip_placeholders(self):
        node = BracketNode(7, 1, Seed(2), FromMatch(3))
        assert node.seeds() == [2]
        node.set_slot(2, UNUSED)
        assert node.seeds() == [2]
        assert node.get_slot(2) == UNUSED

    def test_walkover(self):
        assert BracketNode(1, 0, UNUSED, FromMatch(2), Rank(3), Rank(4)).is_walkover
        assert not BracketNode(1, 0, Seed(1), Seed(2), Rank(1), Rank(2)).is_walkover
        assert not BracketNode(1, 0, UNUSED, UNUSED).is_walkover

    def test_copy_is_independent(self):
        node = BracketNode(1, 0, Seed(1), Seed(2), Rank(1), Rank(2))
        clone = node.copy()
        assert clone == node
        clone.set_slot(1, UNUSED)
        assert clone != node
        assert node.slot1 == Seed(1)

    def test_to_dict(self):
        node = BracketNode(3, 1, Seed(1), FromMatch(5), Advance(1, 1), None)
        assert node.to_dict() == {
            'id': 3,
            'depth': 1,
            'slots': [{'type': 'seed', 'rank': 1}, {'type': 'match', 'match_id': 5}],
            'winner': {'type': 'advance', 'match_id': 1, 'slot': 1},
            'loser': None,
        }

    def test_to_dict_rank_and_unused(self):
        node = BracketNode(2, 0, UNUSED, FromMatch(4), Rank(3), Rank(4))
        data = node.to_dict()
        assert data['slots'][0] == {'type': 'unused'}
        assert data['winner'] == {'type': 'rank', 'rank': 3}
        assert data['loser'] == {'type': 'rank', 'rank': 4}

    def test_repr(self):
        repr_str = repr(BracketNode(9, 2, Seed(4), Seed(5)))
        assert "id=9" in repr_str
        assert "Seed(rank=4)" in repr_str
