"""CLI argument parser and dispatch for memban."""

import argparse

from memban.cli._common import configure_console_logging, configure_tui_logging, load_settings_or_die
from memban.config import LOG_LEVELS
from memban.service import KanbanService


def run_console(args) -> int:
    """Run the interactive console on stdin/stdout."""
    from memban.cli.console import ConsoleController
    from memban.cli.view import ConsoleView

    settings = load_settings_or_die(args)
    configure_console_logging(settings)

    service = KanbanService()
    if settings.sample_data:
        service.create_sample_data()
    ConsoleController(service, ConsoleView()).run()
    return 0


def run_tui(args) -> int:
    """Run the Textual board UI."""
    from memban.ui import MembanApp

    settings = load_settings_or_die(args)
    configure_tui_logging(settings)

    MembanApp(KanbanService(), settings).run()
    return 0


def _common_options(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    """Options accepted both before and after the noun.

    Noun parsers suppress their defaults so they don't overwrite values
    given before the noun.
    """
    common = argparse.ArgumentParser(
        add_help=False,
        argument_default=argparse.SUPPRESS if suppress_defaults else None,
    )
    common.add_argument("--sample", action="store_true", help="Start with the sample board")
    common.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: $MEMBAN_LOG_LEVEL or WARNING)",
    )
    common.add_argument("--board", help="Name of the board created at startup (TUI, default: memban)")
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="memban",
        description="In-memory kanban board",
        parents=[_common_options()],
    )
    parser.set_defaults(func=run_tui)

    nouns = parser.add_subparsers(dest="noun")
    sub_common = _common_options(suppress_defaults=True)

    tui_p = nouns.add_parser("tui", help="Open the board UI (default)", parents=[sub_common])
    tui_p.set_defaults(func=run_tui)

    console_p = nouns.add_parser("console", help="Interactive line console", parents=[sub_common])
    console_p.set_defaults(func=run_console)

    return parser
