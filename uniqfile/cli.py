"""
Command-line interface for uniqfile.

Stores each SOURCE file (or stdin) in an output directory under its
content-derived name and prints the resulting file names.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from tqdm import tqdm

from .config import (
    DEFAULT_CLI_ENCODING,
    DEFAULT_FLAG,
    DEFAULT_MODE,
    DEFAULT_OUTPUT,
    EXTENSION_SEPARATOR,
    FALLBACK_EXTENSION,
    _WRITE_FLAGS,
)
from .hashing import get_file_name
from .logging_setup import log, setup_logging
from .options import WriteOptions
from .writer import WriteResult, write_file, write_file_sync

STDIN_SOURCE = "-"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="uniqfile",
        description="Store files under content-derived (SHA-256) names. "
                    "Identical content is written only once.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The output directory can also be set via the UNIQFILE_OUTPUT "
            "env var.\nIt must already exist; it is never created."
        ),
    )
    parser.add_argument(
        "sources", nargs="+", metavar="SOURCE",
        help=f"File to store ('{STDIN_SOURCE}' reads stdin)",
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT,
        help=f"Output directory (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-e", "--ext", default=None,
        help="Extension for every stored file (default: the source's "
             f"suffix, or '{FALLBACK_EXTENSION}')",
    )
    parser.add_argument(
        "--encoding", default=DEFAULT_CLI_ENCODING,
        help=f"Text encoding option (default: {DEFAULT_CLI_ENCODING})",
    )
    parser.add_argument(
        "--mode", type=lambda s: int(s, 8), default=None,
        help="Octal permission bits for new files (default: 666 minus umask)",
    )
    parser.add_argument(
        "--flag", default=DEFAULT_FLAG, choices=sorted(_WRITE_FLAGS),
        help=f"Open flag for new files (default: {DEFAULT_FLAG})",
    )
    parser.add_argument(
        "--async", dest="use_async", action="store_true",
        help="Store all sources concurrently",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Only print the names the sources would be stored under",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write log output to this file",
    )
    return parser.parse_args(argv)


def source_extension(source: str, override: str | None) -> str:
    """Extension to store *source* under."""
    if override is not None:
        return override
    if source == STDIN_SOURCE:
        return FALLBACK_EXTENSION
    suffix = Path(source).suffix
    return suffix.lstrip(EXTENSION_SEPARATOR) or FALLBACK_EXTENSION


def read_source(source: str) -> bytes:
    if source == STDIN_SOURCE:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _report(source: str, result: WriteResult) -> None:
    if result.written:
        log.info("[SAVE] %s → %s", source, result.file_name)
    else:
        log.info("[DUP] %s already stored as %s", source, result.file_name)


def _store_sequential(jobs, output: str, options: WriteOptions) -> list[str | None]:
    names: list[str | None] = []
    for source, ext, data in tqdm(jobs, desc="Storing", unit="file",
                                  disable=len(jobs) < 2):
        try:
            result = write_file_sync(output, ext, data, options)
        except OSError as exc:
            log.error("[ERR] %s: %s", source, exc)
            names.append(None)
            continue
        _report(source, result)
        names.append(result.file_name)
    return names


async def _store_concurrent(jobs, output: str, options: WriteOptions) -> list[str | None]:
    results = await asyncio.gather(
        *(write_file(output, ext, data, options) for _, ext, data in jobs),
        return_exceptions=True,
    )
    names: list[str | None] = []
    for (source, _, _), result in zip(jobs, results):
        if isinstance(result, OSError):
            log.error("[ERR] %s: %s", source, result)
            names.append(None)
        elif isinstance(result, BaseException):
            raise result
        else:
            _report(source, result)
            names.append(result.file_name)
    return names


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line; returns the process exit status."""
    mode = DEFAULT_MODE if args.mode is None else args.mode
    options = WriteOptions(encoding=args.encoding, mode=mode, flag=args.flag)

    failed = False
    jobs = []
    for source in args.sources:
        try:
            data = read_source(source)
        except OSError as exc:
            log.error("[ERR] cannot read %s: %s", source, exc)
            failed = True
            continue
        jobs.append((source, source_extension(source, args.ext), data))

    if args.dry_run:
        for source, ext, data in jobs:
            name = get_file_name(ext, data)
            log.debug("[DRY] %s → %s", source, name)
            print(name)
        return 1 if failed else 0

    log.debug("Storing %d source(s) in %s", len(jobs), Path(args.output).resolve())
    if args.use_async:
        names = asyncio.run(_store_concurrent(jobs, args.output, options))
    else:
        names = _store_sequential(jobs, args.output, options)

    for name in names:
        if name is None:
            failed = True
        else:
            print(name)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
