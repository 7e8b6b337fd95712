import logging
import os
import sys
import yaml
from knockout.display import get_match_label
from knockout.errors import BracketError
from knockout.generator import BracketStyle, generate_bracket, get_num_rounds, parse_bracket_style
from knockout.models import FromMatch, Rank, Seed, UNUSED
from knockout.settings import load_settings


def load_teams(file_path):
    """Team names from a pools YAML file (pool name -> list of team names), in seed order."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        pools_data = yaml.safe_load(file) or {}
    teams = []
    for pool_name, team_names in pools_data.items():
        for team_name in team_names or []:
            teams.append(team_name)
    return teams


def describe_slot(slot, teams):
    if isinstance(slot, Seed):
        if slot.rank <= len(teams):
            return f"{teams[slot.rank - 1]} (#{slot.rank})"
        return f"#{slot.rank}"
    if isinstance(slot, FromMatch):
        return f"M{slot.match_id}"
    if slot == UNUSED:
        return "-"
    return str(slot)


def describe_target(target):
    if isinstance(target, Rank):
        return f"rank {target.rank}"
    if target is None:
        return "out"
    return f"M{target.match_id}"


def format_bracket(nodes, teams=None, style=BracketStyle.SINGLE_ELIMINATION):
    """One line per match, grouped by round label."""
    teams = teams or []
    lines = []
    max_depth = max((n.depth for n in nodes), default=0)
    current_label = None
    for node in nodes:
        label = get_match_label(node, max_depth, style)
        if label != current_label:
            if current_label is not None:
                lines.append("")  # Blank line between rounds
            lines.append(f"# {label}")
            current_label = label
        lines.append(f"M{node.id}: {describe_slot(node.slot1, teams)} vs {describe_slot(node.slot2, teams)}"
                     f"  [winner -> {describe_target(node.winner_target)},"
                     f" loser -> {describe_target(node.loser_target)}]")
    return lines


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    settings = load_settings()
    logging.basicConfig(level=settings['log_level'])

    if not argv:
        print("Usage: generate_bracket.py <player count | teams.yaml> [style]")
        return 2

    teams = []
    if os.path.exists(argv[0]):
        teams = load_teams(argv[0])
        num_players = len(teams)
    else:
        try:
            num_players = int(argv[0])
        except ValueError:
            print(f"Error: {argv[0]} is neither a player count nor a teams file")
            return 2

    try:
        style = parse_bracket_style(argv[1] if len(argv) > 1 else settings['bracket_style'])
        nodes = generate_bracket(num_players, style, third_place=settings['third_place_match'])
    except BracketError as e:
        print(f"Error: {e}")
        return 1

    if not nodes:
        print(f"No bracket possible for {num_players} players.")
        return 0

    print(f"{num_players} players, {get_num_rounds(num_players, style)} rounds, {len(nodes)} matches")
    print()
    for line in format_bracket(nodes, teams, style):
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
