"""CLI options for selecting players, search depth, and config paths."""


def _positive_int(text):
    import argparse

    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Qirkat: play against the computer or watch it play itself")
    parser.add_argument("files", nargs="*", help="Command files to read instead of the terminal")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--depth", type=_positive_int, help="Minimax search depth for AI players")
    player_kinds = ["human", "ai", "random"]
    parser.add_argument("--white", choices=player_kinds, help="Who plays White after 'clear'")
    parser.add_argument("--black", choices=player_kinds, help="Who plays Black after 'clear'")
    parser.add_argument("--seed", type=int, help="Seed for the random player")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--timing", action="store_true", help="Report time spent choosing AI moves on quit")
    return parser.parse_args(argv)
