"""Command line interface for the tongue vocabulary manager"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.settings import settings
from .core.display import DisplayPolicy
from .core.factory import create_vocabulary_manager
from .core.interfaces import RandomSource
from .core.vocabulary import VocabularyManager
from .exceptions import EntryValidationError, SelectionError, TongueError
from .logging_config import get_logger, resolve_level, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(
        prog="tongue",
        description="a cli vocabulary manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tongue add Hallo Ciao              # Add a new entry
  tongue list                        # List all entries
  tongue show --native Hallo         # Print the foreign word for 'Hallo'
  tongue --no-native show -i 2       # Quiz yourself on entry 2
  tongue --file it.json delete Hallo # Delete from another collection
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=settings.store.file,
        help=f"specify JSON file (default: {settings.store.file})",
    )

    display_group = parser.add_argument_group("display options")
    display_group.add_argument(
        "--no-native",
        action="store_true",
        default=settings.display.no_native,
        help="don't display native word",
    )
    display_group.add_argument(
        "--no-foreign",
        action="store_true",
        default=settings.display.no_foreign,
        help="don't display foreign word (ignored together with --no-native)",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v",
        "-m",
        "--verbose",
        action="store_true",
        default=settings.verbose,
        help="display (more) additional messages",
    )
    log_group.add_argument(
        "--debug",
        action="store_true",
        default=settings.debug,
        help="Enable debug logging",
    )
    log_group.add_argument(
        "--log-file", type=Path, default=settings.logging.file, help="Write logs to file"
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    add = sub.add_parser(
        "add",
        aliases=["a"],
        help="add a new entry to the database. First argument is native, second is foreign word.",
    )
    add.add_argument("terms", nargs="*", metavar="WORD", help="native and foreign word")
    add.set_defaults(handler=cmd_add)

    delete = sub.add_parser(
        "delete",
        aliases=["d"],
        help="delete entry from the database. Argument is the native word. "
        "Only the first occurrence will be deleted.",
    )
    delete.add_argument(
        "terms", nargs="*", metavar="WORD", help="native word of the entry"
    )
    delete.set_defaults(handler=cmd_delete)

    list_cmd = sub.add_parser("list", aliases=["l"], help="list all entries")
    list_cmd.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    list_cmd.set_defaults(handler=cmd_list)

    show = sub.add_parser(
        "show",
        aliases=["s"],
        help="display an entry (random one unless a selector is given)",
    )
    show.add_argument(
        "-i", "--index", type=int, help="display entry with index 'index'"
    )
    show.add_argument(
        "-n", "--native", help="display entry where native word is 'native'"
    )
    show.add_argument(
        "-f", "--foreign", help="display entry where foreign word is 'foreign'"
    )
    show.set_defaults(handler=cmd_show)

    return parser


def cmd_add(manager: VocabularyManager, args: argparse.Namespace) -> None:
    """Append a new entry; a missing file is created"""
    if len(args.terms) < 2:
        print("Usage: add native foreign")
        return
    native, foreign = args.terms[0], args.terms[1]
    try:
        created = manager.add(native, foreign)
    except EntryValidationError as e:
        print(e.message)
        return
    if created:
        logger.info(f"Created new file: {manager.store.path}")


def cmd_delete(manager: VocabularyManager, args: argparse.Namespace) -> None:
    """Delete the first entry matching the native word"""
    if not args.terms:
        print("Usage: delete native")
        return
    manager.delete(args.terms[0])


def cmd_list(manager: VocabularyManager, args: argparse.Namespace) -> None:
    """Print every entry with its 1-based index"""
    entries = manager.entries()
    if args.verbose:
        print(f"You have {len(entries)} entries in your database:")
    policy = DisplayPolicy.from_flags(args.no_native, args.no_foreign)
    for line in policy.format_listing(entries):
        print(line)


def cmd_show(manager: VocabularyManager, args: argparse.Namespace) -> None:
    """Print one entry, looked up by index, native or foreign word, or at random"""
    selectors = [
        name
        for name in ("index", "native", "foreign")
        if getattr(args, name) is not None
    ]
    if len(selectors) > 1:
        print("Please use only one of --index, --native and --foreign.")
        return

    if args.native is not None:
        for term in manager.lookup_native(args.native):
            print(term)
        return
    if args.foreign is not None:
        for term in manager.lookup_foreign(args.foreign):
            print(term)
        return

    policy = DisplayPolicy.from_flags(args.no_native, args.no_foreign)
    try:
        if args.index is not None:
            entry = manager.entry_at(args.index)
        else:
            entry = manager.random_entry()
    except SelectionError as e:
        print(e.message)
        return
    print(policy.format_entry(entry))


def main(
    argv: list[str] | None = None, random_source: RandomSource | None = None
) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    log_level = resolve_level(args.debug, args.verbose, settings.logging.level)
    log_file = str(args.log_file) if args.log_file else None
    setup_logging(log_level, log_file)

    try:
        logger.debug(f"Running '{args.command}' on {args.file}")
        manager = create_vocabulary_manager(args.file, random_source=random_source)
        args.handler(manager, args)
    except TongueError as e:
        logger.error(f"Application error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
