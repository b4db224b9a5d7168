# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2026/10/12 22:05:48
# @Author : Kariko Lin

"""Line helpers shared by both dump parsers."""

import logging
from io import TextIOBase
from typing import Iterable, Iterator

NumberedLine = tuple[int, str]


def numbered(buf: TextIOBase) -> Iterator[NumberedLine]:
    """Yield `(lineno, line)` with the line terminator removed.

    Line numbers start from 1, just like what editors show.
    """
    lineno = 0
    while i := buf.readline():
        lineno += 1
        yield lineno, i.rstrip('\r\n')


def joined(lines: Iterable[NumberedLine], marker: str = '\\', *,
           comments: str = '', separator: str = '') -> Iterator[NumberedLine]:
    """Glue continued lines together.

    A line ending with `marker` loses it and takes the next physical line
    straight after, as long as the marker keeps showing up.
    The reported line number is the first physical one.

    Only a line holding `separator` may start a continuation; comments
    and lines without it pass through untouched, marker and all.
    """
    start, pending = 0, None
    for lineno, line in lines:
        if pending is None:
            if is_blank(line, comments) or separator not in line:
                yield lineno, line
                continue
            start, pending = lineno, line
        else:
            pending += line
        if pending.endswith(marker):
            pending = pending[:-len(marker)]
            continue
        yield start, pending
        pending = None
    # dangling marker on the very last line.
    if pending is not None:
        yield start, pending


def is_blank(line: str, comments: str = '') -> bool:
    """Empty, whitespace only, or starting with any char of `comments`."""
    stripped = line.lstrip()
    return not stripped or stripped[0] in comments


def skipped(lineno: int, line: str, reason: object) -> None:
    logging.debug(f'line {lineno} skipped ({reason}): {line!r}')
