"""ASCII pictures of a skip map, for debugging and teaching.

Example for a map of height 3 holding ``1`` (height 1) and ``2`` (height 3)::

               X X X
               | | |
             1-* | |  'one'
               | | |
             2-*-*-*  'two'
               | | |
               O O O
"""
from __future__ import annotations

import io
import sys
from typing import Any, Optional, TextIO

from .skiplist import SkipMap

__all__ = ["dump", "dump_entries", "format_dump"]

_KEY_WIDTH = 10


def _key_column(key: Any) -> str:
    text = "<null>" if key is None else str(key)
    if len(text) < _KEY_WIDTH:
        return text.rjust(_KEY_WIDTH)
    return text[:_KEY_WIDTH]


def dump(skipmap: SkipMap[Any, Any], out: Optional[TextIO] = None) -> None:
    """Write the level structure of *skipmap* to *out* (stdout by default)."""
    pen = out if out is not None else sys.stdout
    leading = " " * _KEY_WIDTH
    height = skipmap.height
    links = leading + " |" * height + "\n"

    pen.write(leading + " X" * height + "\n")
    pen.write(links)
    for (key, node_height), value in zip(skipmap.node_heights(), skipmap.values()):
        row = _key_column(key) + "-*" * node_height + " |" * (height - node_height)
        pen.write(f"{row}  {value!r}\n")
        pen.write(links)
    pen.write(leading + " O" * height + "\n")


def format_dump(skipmap: SkipMap[Any, Any]) -> str:
    buf = io.StringIO()
    dump(skipmap, buf)
    return buf.getvalue()


def dump_entries(skipmap: SkipMap[Any, Any], out: Optional[TextIO] = None) -> None:
    """Print ``[key:value ...]``, one entry per line."""
    pen = out if out is not None else sys.stderr
    pen.write("[")
    skipmap.for_each(lambda key, value: pen.write(f"{key}:{value} \n"))
    pen.write("]\n")
