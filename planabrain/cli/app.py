"""
Command-line entry point.

    planabrain ingest <sourceDir>         # build the index, print chunk count
    planabrain ask <question...>          # web-search answer with memory
    planabrain ask --index <question...>  # answer from the local index
    planabrain forget                     # clear the user's chat memory

Dependencies: argparse, python-dotenv, planabrain.core, planabrain.configs
System role: CLI surface over ingestion and answering
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from planabrain import __version__
from planabrain.boundary.memory_store import reset_user_memory
from planabrain.configs import Settings, get_settings
from planabrain.core.chat import answer_with_web_search
from planabrain.core.exceptions import PlanabrainError
from planabrain.core.rag import answer_question, ingest_directory
from planabrain.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def load_env() -> None:
    """
    Load environment variables from a .env file.

    DOTENV_CONFIG_PATH wins when set; otherwise the first existing of
    ./.env and ../.env is used.
    """
    explicit_path = os.environ.get("DOTENV_CONFIG_PATH")
    if explicit_path:
        load_dotenv(explicit_path)
        return

    cwd = Path.cwd()
    for candidate in (cwd / ".env", cwd.parent / ".env"):
        if candidate.exists():
            load_dotenv(candidate)
            return

    load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    """Build the planabrain argument parser."""
    parser = argparse.ArgumentParser(
        prog="planabrain",
        description="Local retrieval-augmented question answering",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--user",
        help="Memory owner for ask/forget (default: PLANABRAIN_USER_ID or 'cli')",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<ingest|ask|forget>")
    subparsers.required = True

    ingest_parser = subparsers.add_parser("ingest", help="Build the index from a directory")
    ingest_parser.add_argument("source_dir", help="Directory of text/code files")

    ask_parser = subparsers.add_parser("ask", help="Answer a question")
    ask_parser.add_argument(
        "--index",
        action="store_true",
        help="Answer from the local index instead of web search",
    )
    ask_parser.add_argument("question", nargs="+", help="Question text")

    subparsers.add_parser("forget", help="Delete the user's conversation memory")
    return parser


def run_command(args: argparse.Namespace, settings: Settings) -> str:
    """
    Execute a parsed command.

    Args:
        args: Parsed CLI arguments
        settings: Application settings

    Returns:
        str: Text printed to stdout
    """
    user_id = args.user or settings.user_id

    if args.command == "ingest":
        count = ingest_directory(args.source_dir, settings)
        return str(count)

    if args.command == "ask":
        question = " ".join(args.question).strip()
        if args.index:
            return answer_question(question, settings)
        return answer_with_web_search(question, settings, user_id=user_id)

    if args.command == "forget":
        removed = reset_user_memory(settings.memory.dir or "", user_id)
        return "removed" if removed else "no memory"

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)

    Returns:
        int: Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "ask" and not " ".join(args.question).strip():
        parser.error("ask requires a question")

    load_env()
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        output = run_command(args, settings)
    except PlanabrainError as e:
        logger.debug(f"{__name__}:main - {type(e).__name__}: {e}")
        sys.stderr.write(f"{e.message}\n")
        return 1
    except Exception as e:
        logger.debug(f"{__name__}:main - unexpected {type(e).__name__}", exc_info=True)
        sys.stderr.write(f"{e}\n")
        return 1

    sys.stdout.write(f"{output}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
