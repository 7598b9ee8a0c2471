"""Interface for ``python -m objutils``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, FileType
from typing import TYPE_CHECKING, Any

from ._version import version
from .traversal import walk


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import TextIO


__all__ = ["format_entries", "main"]

logger = logging.getLogger(__name__)


def format_entries(document: Any, *, sep: str = ".", containers: bool = False) -> Iterator[str]:
    """Render one line per entry of ``document`` in traversal order.

    Leaves are shown as ``path = <json value>``; containers, when requested, as
    the bare path.
    """
    for path, value, is_leaf in walk(document):
        dotted = sep.join(str(key) for key in path)
        if is_leaf:
            yield f"{dotted} = {json.dumps(value)}"
        elif containers:
            yield dotted


def _load(stream: TextIO) -> Any:
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON in {stream.name}: {exc}"
        raise ValueError(msg) from exc


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="objutils", description="List the entries of a JSON document depth first.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("file", nargs="?", type=FileType("r"), help="JSON document to walk, '-' for stdin")
    _ = parser.add_argument("--sep", default=".", help="path separator (default: %(default)s)")
    _ = parser.add_argument("--containers", action="store_true", help="also list container entries")
    _ = parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    options = parser.parse_args(args)

    logging.basicConfig(level=options.log_level, format="%(levelname)s %(name)s: %(message)s")
    if options.file is None:
        return

    with options.file as stream:
        try:
            document = _load(stream)
        except ValueError as exc:
            parser.error(str(exc))
    logger.debug("loaded %s", options.file.name)

    for line in format_entries(document, sep=options.sep, containers=options.containers):
        _ = sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
