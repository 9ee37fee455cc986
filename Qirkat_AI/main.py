"""Entry point for Qirkat sessions. Load config, wire input sources, run Qirkatgame."""

import sys
from pathlib import Path

import yaml

from .Qirkatgame import LineSource, Qirkatgame
from .utils.cli import parse_args
from .utils.logger import configure_logging


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "search_depth": 5,
    "white_player": "human",
    "black_player": "ai",
    "seed": None,
    "log_level": "WARNING",
    "report_timing": False,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Qirkat_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Settings from YAML on top of the defaults; a missing file gives the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def read_command_files(paths):
    lines = []
    for path in paths:
        with open(path, "r", encoding="utf-8") as f:
            lines.extend(f.read().splitlines())
    return lines


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    configure_logging(args.log_level or settings["log_level"])

    source = LineSource(read_command_files(args.files)) if args.files else None
    game = Qirkatgame(
        source=source,
        depth=args.depth if args.depth is not None else settings["search_depth"],
        white_player=args.white or settings["white_player"],
        black_player=args.black or settings["black_player"],
        seed=args.seed if args.seed is not None else settings["seed"],
        report_timing=args.timing or bool(settings["report_timing"]),
    )
    game.process()
    return 0


if __name__ == "__main__":
    sys.exit(main())
