"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tapboard", description=__doc__)
    parser.add_argument(
        "--fen", help="start from this position instead of the initial one"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--no-animation", action="store_true", help="place pieces without sliding"
    )
    parser.add_argument(
        "--hide-legal-moves",
        action="store_true",
        help="do not mark legal targets of the selected piece",
    )
    return parser.parse_known_args(argv)[0]


def main() -> None:
    """Launch the Tapboard application."""
    from tapboard.game.engine_factory import create_default_engine
    from tapboard.ui.bootstrap import run_application
    from tapboard.ui.settings import BoardSettings

    args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = BoardSettings(
        animate_moves=not args.no_animation,
        show_legal_moves=not args.hide_legal_moves,
    )

    sys.exit(
        run_application(lambda: create_default_engine(args.fen), sys.argv, settings)
    )


if __name__ == "__main__":
    main()
