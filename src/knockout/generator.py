"""
Bracket generation entry points.
"""
import logging
from enum import Enum
from typing import List, Union

from knockout.builder import BracketTreeBuilder
from knockout.errors import UnsupportedBracketStyle
from knockout.models import BracketNode
from knockout.template import TEMPLATE_MAX_PLAYERS, generate_template_bracket

logger = logging.getLogger(__name__)


class BracketStyle(Enum):
    SINGLE_ELIMINATION = 'single_elimination'
    FIXED_SEEDED_TEMPLATE_16 = 'fixed_seeded_template_16'


def parse_bracket_style(style: Union[BracketStyle, str]) -> BracketStyle:
    """Accept a BracketStyle or its string value."""
    if isinstance(style, BracketStyle):
        return style
    try:
        return BracketStyle(style)
    except ValueError:
        raise UnsupportedBracketStyle(style) from None


def calculate_bracket_size(num_players: int) -> int:
    """Next power of two >= num_players, or 0 if no bracket is possible."""
    if num_players < 2:
        return 0
    size = 2
    while size < num_players:
        size *= 2
    return size


def get_num_rounds(num_players: int, style: Union[BracketStyle, str] = BracketStyle.SINGLE_ELIMINATION) -> int:
    """
    Number of rounds in the generated bracket, 0 if no bracket is possible.

    Counted by doubling instead of log2 so that exact powers of two never
    round up to an extra round.
    """
    style = parse_bracket_style(style)
    if num_players < 2:
        return 0

    if style is BracketStyle.FIXED_SEEDED_TEMPLATE_16:
        if num_players > 8:
            return 5
        if num_players > 4:
            return 3
        if num_players > 2:
            return 2
        return 1

    rounds = 1
    size = 2
    while size < num_players:
        size *= 2
        rounds += 1
    return rounds


def generate_bracket(num_players: int, style: Union[BracketStyle, str] = BracketStyle.SINGLE_ELIMINATION,
                     third_place: bool = True) -> List[BracketNode]:
    """
    Generate the match graph for `num_players` participants.

    Returns the matches ordered from the first round to the final, or an
    empty list when fewer than two players (or, for the 16-player template,
    more than 16) are given. `third_place` only applies to single
    elimination; the template plays out every place anyway.
    """
    style = parse_bracket_style(style)

    if num_players < 2:
        logger.debug("No bracket for %d players", num_players)
        return []

    if style is BracketStyle.SINGLE_ELIMINATION:
        nodes = BracketTreeBuilder(num_players, third_place=third_place).build()
    elif style is BracketStyle.FIXED_SEEDED_TEMPLATE_16:
        if num_players > TEMPLATE_MAX_PLAYERS:
            logger.warning("The 16-player template cannot hold %d players", num_players)
        nodes = generate_template_bracket(num_players)
    else:
        raise UnsupportedBracketStyle(style)

    logger.debug("Generated %s bracket for %d players with %d matches",
                 style.value, num_players, len(nodes))
    return nodes
