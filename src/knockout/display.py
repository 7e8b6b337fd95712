"""
Helpers for callers that draw or schedule a generated bracket.
"""
from typing import Dict, List, Union

from knockout.generator import BracketStyle, calculate_bracket_size, generate_bracket, get_num_rounds, parse_bracket_style
from knockout.models import BracketNode, Rank, Seed
from knockout.template import TEMPLATE_MAX_PLAYERS


def get_round_name(teams_in_round: int) -> str:
    """Get the name of a round based on number of teams."""
    if teams_in_round == 2:
        return "Final"
    elif teams_in_round == 4:
        return "Semifinal"
    elif teams_in_round == 8:
        return "Quarterfinal"
    else:
        return f"Round of {teams_in_round}"


def get_match_label(node: BracketNode, max_depth: int, style: BracketStyle = BracketStyle.SINGLE_ELIMINATION) -> str:
    """Round label for one match; placement matches are named after the places they decide."""
    winner, loser = node.winner_target, node.loser_target
    if isinstance(winner, Rank) and winner.rank > 1:
        if isinstance(loser, Rank):
            return f"Places {winner.rank}-{loser.rank}"
        return f"Place {winner.rank}"
    if style is BracketStyle.SINGLE_ELIMINATION:
        return get_round_name(2 ** (node.depth + 1))
    if isinstance(winner, Rank):
        return "Final"
    return f"Round {max_depth - node.depth + 1}"


def bracket_to_dicts(nodes: List[BracketNode]) -> List[Dict]:
    return [node.to_dict() for node in nodes]


def get_playable_matches(nodes: List[BracketNode]) -> List[BracketNode]:
    """Matches whose two participants are both known seeds and can be scheduled now."""
    return [n for n in nodes if isinstance(n.slot1, Seed) and isinstance(n.slot2, Seed)]


def get_terminal_ranks(nodes: List[BracketNode]) -> Dict[int, Dict]:
    """
    Map each final rank to the match that awards it.

    Returns {rank: {'match_id': id, 'role': 'winner' | 'loser'}}. A walkover
    match still awards the winner rank but its loser rank belongs to no one
    and is left out.
    """
    ranks = {}
    for node in nodes:
        if isinstance(node.winner_target, Rank):
            ranks[node.winner_target.rank] = {'match_id': node.id, 'role': 'winner'}
        if isinstance(node.loser_target, Rank) and not node.is_walkover:
            ranks[node.loser_target.rank] = {'match_id': node.id, 'role': 'loser'}
    return dict(sorted(ranks.items()))


def get_bracket_display(num_players: int, style: Union[BracketStyle, str] = BracketStyle.SINGLE_ELIMINATION,
                        third_place: bool = True) -> Dict:
    """
    Get bracket data formatted for UI display.

    Returns dict with:
    - 'nodes': all matches as dicts, first round first
    - 'rounds': round label -> list of match dicts
    - 'bracket_size': slots in the full draw
    - 'total_rounds': number of rounds
    - 'byes': slots without a real player
    - 'matches_per_round': round label -> match count
    - 'ranks': final rank -> deciding match
    """
    style = parse_bracket_style(style)
    nodes = generate_bracket(num_players, style, third_place=third_place)

    if not nodes:
        bracket_size = 0
    elif style is BracketStyle.FIXED_SEEDED_TEMPLATE_16:
        bracket_size = TEMPLATE_MAX_PLAYERS
    else:
        bracket_size = calculate_bracket_size(num_players)

    max_depth = max((n.depth for n in nodes), default=0)
    rounds = {}
    for node in nodes:
        label = get_match_label(node, max_depth, style)
        rounds.setdefault(label, []).append(node.to_dict())

    return {
        'players': num_players,
        'style': style.value,
        'nodes': bracket_to_dicts(nodes),
        'rounds': rounds,
        'bracket_size': bracket_size,
        'total_rounds': get_num_rounds(num_players, style) if nodes else 0,
        'byes': bracket_size - num_players if nodes else 0,
        'matches_per_round': {label: len(matches) for label, matches in rounds.items()},
        'ranks': get_terminal_ranks(nodes),
    }
