"""
Shared pytest fixtures for bracket generator tests.

Running tests:
    pytest tests/                  - full suite
    pytest tests/ -m "not slow"   - fast subset (skips exhaustive player-count sweeps)
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from knockout.models import Advance, FromMatch, Rank, Seed


def _graph_errors(nodes):
    """List every broken edge in a bracket graph (empty list = consistent)."""
    errors = []
    by_id = {n.id: n for n in nodes}
    if len(by_id) != len(nodes):
        errors.append("duplicate match ids")

    for node in nodes:
        for role, target in (('winner', node.winner_target), ('loser', node.loser_target)):
            if not isinstance(target, Advance):
                continue
            next_node = by_id.get(target.match_id)
            if next_node is None:
                errors.append(f"M{node.id} {role} advances to missing M{target.match_id}")
            elif next_node.get_slot(target.slot) != FromMatch(node.id):
                errors.append(f"M{node.id} {role} slot {target.slot} of M{target.match_id} "
                              f"holds {next_node.get_slot(target.slot)}")

        for index in (1, 2):
            slot = node.get_slot(index)
            if not isinstance(slot, FromMatch):
                continue
            source = by_id.get(slot.match_id)
            if source is None:
                errors.append(f"M{node.id} slot {index} comes from missing M{slot.match_id}")
            elif Advance(node.id, index) not in (source.winner_target, source.loser_target):
                errors.append(f"M{source.id} does not feed M{node.id} slot {index}")
    return errors


@pytest.fixture
def graph_errors():
    """Callable returning the broken edges of a bracket."""
    return _graph_errors


@pytest.fixture
def chalk_seed():
    """
    Callable resolving a slot to the seed that occupies it if the better seed
    always wins.
    """
    def resolve(node, index, by_id):
        slot = node.get_slot(index)
        if isinstance(slot, Seed):
            return slot.rank
        source = by_id[slot.match_id]
        ranks = [resolve(source, 1, by_id), resolve(source, 2, by_id)]
        if source.winner_target == Advance(node.id, index):
            return min(ranks)
        return max(ranks)
    return resolve


@pytest.fixture
def seed_ranks():
    """Callable listing every direct seed rank in a bracket."""
    def collect(nodes):
        return sorted(rank for node in nodes for rank in node.seeds())
    return collect


@pytest.fixture
def winner_ranks():
    """Callable listing the nodes whose winner gets a given final rank."""
    def find(nodes, rank):
        return [n for n in nodes if n.winner_target == Rank(rank)]
    return find
