import argparse
import sys
from pathlib import Path

from treemenu.app.context import AppContext
from treemenu.config import settings
from treemenu.config.settings import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_RESULT_ABORT_TIMEOUT,
    DEFAULT_RESULT_POLL_INTERVAL,
)
from treemenu.demo import build_demo_registry
from treemenu.exceptions import StructuralError
from treemenu.logging import LoggerFactory, setup_logging
from treemenu.menu.dispatcher import ActionDispatcher
from treemenu.menu.navigator import NavigationEngine
from treemenu.ui.display import ConsoleDisplay
from treemenu.ui.input import KeyboardInput


def _positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Hierarchical console menu")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Also log keystrokes and result polling")
    parser.add_argument("--log-dir", type=Path, default=None, help="Directory for log files")
    parser.add_argument("--settings", type=Path, default=None, help="Path to a settings JSON file")
    parser.add_argument(
        "--poll-interval",
        type=_positive_float,
        default=None,
        help="Seconds between checks for an asynchronous result",
    )
    parser.add_argument(
        "--abort-after",
        type=_positive_float,
        default=None,
        help="Seconds to wait for an asynchronous result before giving up",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.settings is not None:
        settings.load_settings(args.settings)
    setup_logging(debug=args.debug, trace=args.trace, log_dir=args.log_dir)
    log = LoggerFactory.for_system()

    display = ConsoleDisplay(
        indent_width=settings.get_int("indent_width", DEFAULT_INDENT_WIDTH),
        line_width=settings.get_int("line_width", 0) or None,
        wrap_text=settings.get_bool("wrap_text", True),
    )
    app_context = AppContext(display=display, input=KeyboardInput())

    registry = build_demo_registry(app_context)
    try:
        root = registry.build()
    except StructuralError as error:
        log.error(f"Menu hierarchy is invalid: {error}")
        print(f"Cannot build menus: {error}", file=sys.stderr)
        return 1

    dispatcher = ActionDispatcher(
        app_context.awaiting_result,
        poll_interval=args.poll_interval
        or settings.get_float("result_poll_interval_seconds", DEFAULT_RESULT_POLL_INTERVAL)
        or DEFAULT_RESULT_POLL_INTERVAL,
        abort_after=args.abort_after
        or settings.get_float("result_abort_timeout_seconds", DEFAULT_RESULT_ABORT_TIMEOUT),
    )
    engine = NavigationEngine(app_context, dispatcher)
    try:
        engine.run(root)
    except KeyboardInterrupt:
        log.info("Interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
