import argparse
import json
import logging
import sys
from typing import Iterable, Iterator, List, Optional

from dir_reader import StringIOReader, WalkOptions, is_dir, read_dir

from dir_reader_cli.config import settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
STDIN_MARKER = "-"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dir-reader",
        description="Expand files and directories into a flat JSON list of file paths.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files or directories; read from stdin when omitted or '-'",
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action=argparse.BooleanOptionalAction,
        default=settings.recursive,
        help="Descend into subdirectories",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=settings.max_depth,
        metavar="N",
        help="Directory levels below each root that may be entered (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help="Logging level (default: %(default)s)",
    )
    return parser


def expand_stdin(paths: List[str]) -> Iterator[str]:
    """Yield *paths* with every "-" replaced by the paths read from stdin."""
    if not paths:
        paths = [STDIN_MARKER]
    for path in paths:
        if path == STDIN_MARKER:
            yield from StringIOReader(sys.stdin)
        else:
            yield path


def collect_files(paths: Iterable[str], recursive: bool, max_depth: int) -> List[str]:
    """Expand every directory in *paths* and pass every other path through."""
    files: List[str] = []
    for path in paths:
        if is_dir(path):
            options = WalkOptions(root_dir=path, recursive=recursive, max_depth=max_depth)
            files.extend(read_dir(options))
        else:
            files.append(path)
    return files


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        files = collect_files(expand_stdin(args.paths), args.recursive, args.max_depth)
    except OSError as e:
        logger.error("cannot read directory: %s", e)
        return 1

    output = json.dumps(files, indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Files written to {args.output} ({len(files)} files)")
    else:
        print(output)
    return 0


def start_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    start_cli()
