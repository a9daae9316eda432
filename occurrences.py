import logging
from collections import namedtuple
from itertools import accumulate

import grapheme
import regex as re

from indexing import From, Through

logger = logging.getLogger(__name__)

Span = namedtuple("Span", "start end")


def _scanner(clusters):
    """Return scan(pattern, start) searching clusters for pattern.

    Matching runs on the joined text; a hit only counts when both of its
    edges fall on cluster boundaries.
    """
    text = "".join(clusters)
    boundaries = list(accumulate(map(len, clusters), initial=0))
    positions = {offset: i for i, offset in enumerate(boundaries)}

    def scan(pattern, start):
        if not pattern or not 0 <= start <= len(clusters):
            return None
        needle = re.compile(re.escape(pattern))
        pos = boundaries[start]
        while True:
            m = needle.search(text, pos)
            if not m:
                return None
            if m.start() in positions and m.end() in positions:
                return Span(positions[m.start()], positions[m.end()])
            # split cluster
            pos = m.start() + 1
    return scan


def find(clusters, pattern, start=0):
    """Return the first match of pattern at or after position start, or None."""
    return _scanner(clusters)(pattern, start)


def find_all(clusters, pattern):
    """Return every non-overlapping match of pattern, left to right."""
    scan = _scanner(clusters)
    spans = []
    cursor = 0
    while cursor < len(clusters):
        span = scan(pattern, cursor)
        if span is None:
            break
        spans.append(span)
        cursor = span.end
    return spans


def find_positions(clusters, character):
    if grapheme.length(character) != 1:
        logger.debug("%r is not a single grapheme cluster", character)
        return []
    return [span.start for span in find_all(clusters, character)]


def find_paired(clusters, begin, end, inclusive=True):
    """Pair each begin match with the nearest end match following it.

    Inclusive spans cover both markers, otherwise only the text between them.
    A begin marker without a following end marker stops the scan.
    """
    scan = _scanner(clusters)
    spans = []
    cursor = 0
    while cursor < len(clusters):
        opening = scan(begin, cursor)
        if opening is None:
            break
        closing = scan(end, opening.end)
        if closing is None:
            logger.debug("unterminated %r at %d", begin, opening.start)
            break
        if inclusive:
            spans.append(Span(opening.start, closing.end))
        else:
            spans.append(Span(opening.end, closing.start))
        cursor = closing.end
    return spans


def _first(clusters, pattern):
    size = grapheme.length(pattern)
    if size < 1 or size > len(clusters):
        return None
    return find(clusters, pattern)


def range_from(clusters, pattern):
    """Everything after the first match of pattern."""
    span = _first(clusters, pattern)
    if span is None:
        return None
    return From(span.end)


def range_through(clusters, pattern):
    """Everything up to and including the first cluster of the first match."""
    span = _first(clusters, pattern)
    if span is None:
        return None
    return Through(span.start)
