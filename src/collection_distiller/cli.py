"""Command-line interface for collection-distiller."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from collection_distiller.pipeline import Orchestrator
from schemas.config import GeneratorConfig
from schemas.report import GenerationReport

DEFAULT_SOURCE = Path(".")
DEFAULT_DATA_DIR = "_data"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _log_report(logger: logging.Logger, report: GenerationReport, source: Path) -> None:
    logger.info(f"  Files written: {len(report.written)}")
    logger.info(f"  Output: {source}")

    if report.unresolved_references:
        logger.warning(f"  Unresolved references: {len(report.unresolved_references)}")

    if report.validation_errors:
        logger.warning(f"  Skipped: {len(report.validation_errors)}")
        for error in report.validation_errors:
            logger.warning(f"    - {error}")


def blog_gen(args: argparse.Namespace) -> int:
    """Execute the blog-gen command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    source = args.source.resolve()
    if not source.exists():
        logger.error(f"Site source not found: {source}")
        return 1

    try:
        config = GeneratorConfig(
            source=source,
            data_dir=args.data_dir,
            excerpt_strategy=args.excerpt_strategy,
            excerpt_length=args.excerpt_length,
            unresolved_references=args.unresolved_references,
            entry_errors=args.entry_errors,
        )
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        report = Orchestrator(config).run()
        _log_report(logger, report, source)
        return 0

    except Exception as e:
        logger.error(f"Failed to generate site collections: {e}")
        return 1


def collection_gen(args: argparse.Namespace) -> int:
    """Execute the collection-gen command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    source = args.source.resolve()
    if not source.exists():
        logger.error(f"Site source not found: {source}")
        return 1

    try:
        config = GeneratorConfig(source=source, data_dir=args.data_dir)
        report = Orchestrator(config).run_collection()
        _log_report(logger, report, source)
        return 0

    except Exception as e:
        logger.error(f"Failed to generate posts collection: {e}")
        return 1


def _add_site_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        type=Path,
        default=DEFAULT_SOURCE,
        help=f"Site source directory (default: {DEFAULT_SOURCE})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=DEFAULT_DATA_DIR,
        help=f"CMS export directory under the source (default: {DEFAULT_DATA_DIR})",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="collection-distiller",
        description="Generate Jekyll collections from a headless CMS export",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    blog_parser = subparsers.add_parser(
        "blog-gen",
        help="Generate blog posts, the blog home and press releases",
        description="Generate _posts, _press_releases and the blog listing page from the CMS export, resolving category, author and image references.",
    )
    _add_site_arguments(blog_parser)
    blog_parser.add_argument(
        "--excerpt-strategy",
        choices=["chars", "words"],
        default="chars",
        help="Truncate synthesized excerpts by characters or by words (default: chars)",
    )
    blog_parser.add_argument(
        "--excerpt-length",
        type=int,
        default=None,
        help="Excerpt limit in characters or words (default: 240 chars / 35 words)",
    )
    blog_parser.add_argument(
        "--unresolved-references",
        choices=["warn", "ignore"],
        default="warn",
        help="Log references that match no entry, or leave them silently (default: warn)",
    )
    blog_parser.add_argument(
        "--entry-errors",
        choices=["skip", "abort"],
        default="skip",
        help="Skip entries with invalid dates or fields, or stop the run (default: skip)",
    )
    blog_parser.set_defaults(func=blog_gen)

    collection_parser = subparsers.add_parser(
        "collection-gen",
        help="Generate the _posts collection only",
        description="Generate _posts from the CMS posts feed without resolving references.",
    )
    _add_site_arguments(collection_parser)
    collection_parser.set_defaults(func=collection_gen)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
