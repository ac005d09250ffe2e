import argparse
import logging
import sys
from pathlib import Path

from src.app_shell.config import ShellConfig, load_shell_config
from src.app_shell.dispatcher import DirectiveDispatcher, DirectiveFailure
from src.components.colors import ColorManager, create_color_manager

logger = logging.getLogger("cli")


def load_colors_file(
    path: Path,
    config: ShellConfig,
) -> tuple[ColorManager, list[DirectiveFailure]]:
    manager = create_color_manager(config.rules)
    dispatcher = DirectiveDispatcher()
    manager.register_commands(dispatcher)

    with open(path, encoding="utf-8") as f:
        failures = dispatcher.dispatch_lines(f, source=str(path))
    return manager, failures


def report_failures(failures: list[DirectiveFailure]) -> None:
    for failure in failures:
        print(str(failure), file=sys.stderr)
        print(f"    {failure.line}", file=sys.stderr)


def handle_check(manager: ColorManager, failures: list[DirectiveFailure]) -> int:
    if failures:
        report_failures(failures)
        return 1
    print(f"OK: {len(manager.dump_config())} color rules.")
    return 0


def handle_dump(manager: ColorManager, failures: list[DirectiveFailure]) -> int:
    report_failures(failures)
    for line in manager.dump_config():
        print(line)
    return 1 if failures else 0


def handle_export(manager: ColorManager, failures: list[DirectiveFailure]) -> int:
    report_failures(failures)
    manager.apply_colors(lambda key, value: print(f"{key}={value}"))
    return 1 if failures else 0


HANDLERS = {
    "check": handle_check,
    "dump": handle_dump,
    "export": handle_export,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal color theme tool")
    parser.add_argument("--rules", help="Path to palette rules YAML")
    parser.add_argument("--log-level", help="Logging level (debug, info, warning, ...)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Validate a colors file")
    check_parser.add_argument("file", help="File with color directives")

    dump_parser = subparsers.add_parser("dump", help="Print normalized color directives")
    dump_parser.add_argument("file", help="File with color directives")

    export_parser = subparsers.add_parser("export", help="Print renderer style values")
    export_parser.add_argument("file", help="File with color directives")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_shell_config(rules_path=args.rules, log_level=args.log_level)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error(str(e))
        return 2

    logging.basicConfig(level=config.log_level)

    path = Path(args.file)
    if not path.is_file():
        logger.error(f"File {path} not found.")
        return 2

    try:
        manager, failures = load_colors_file(path, config)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        return 2
    return HANDLERS[args.command](manager, failures)


if __name__ == "__main__":
    sys.exit(main())
