"""
Knockout bracket generation: single elimination with a third-place match,
byes for player counts that are not powers of two, and a fixed 16-player
ranking bracket.
"""
from knockout.errors import BracketError, BracketInvariantError, UnsupportedBracketStyle
from knockout.generator import BracketStyle, calculate_bracket_size, generate_bracket, get_num_rounds
from knockout.models import UNUSED, Advance, BracketNode, FromMatch, MatchIdGenerator, Rank, Seed, Unused

__all__ = [
    'Advance',
    'BracketError',
    'BracketInvariantError',
    'BracketNode',
    'BracketStyle',
    'FromMatch',
    'MatchIdGenerator',
    'Rank',
    'Seed',
    'UNUSED',
    'Unused',
    'UnsupportedBracketStyle',
    'calculate_bracket_size',
    'generate_bracket',
    'get_num_rounds',
]
