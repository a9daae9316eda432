import logging

import grapheme

import indexing
import occurrences
from indexing import HalfOpen, Closed, From, UpTo, Through, Unbounded
from occurrences import Span

logger = logging.getLogger(__name__)

__all__ = [
    "Gstr", "Span", "HalfOpen", "Closed", "From", "UpTo", "Through", "Unbounded",
    "element_at", "slice_of", "occurrences_of", "positions_of", "paired_ranges",
    "range_from", "range_through", "extract",
]


def _clusters(text):
    return tuple(grapheme.graphemes(str(text)))


def element_at(text, index):
    """Return the grapheme cluster at a logical index, or None."""
    clusters = _clusters(text)
    position = indexing.resolve_index(clusters, index)
    if position is None:
        logger.debug("index %d out of range for %d clusters", index, len(clusters))
        return None
    return clusters[position]


def slice_of(text, shape, mode=None):
    clusters = _clusters(text)
    bounds = indexing.resolve_range(clusters, shape, mode)
    if bounds is None:
        return None
    start, stop = bounds
    return Gstr("".join(clusters[start:stop]))


def occurrences_of(text, pattern):
    return occurrences.find_all(_clusters(text), pattern)


def positions_of(text, character):
    return occurrences.find_positions(_clusters(text), character)


def paired_ranges(text, begin, end, inclusive=True):
    return occurrences.find_paired(_clusters(text), begin, end, inclusive)


def range_from(text, pattern):
    return occurrences.range_from(_clusters(text), pattern)


def range_through(text, pattern):
    return occurrences.range_through(_clusters(text), pattern)


def extract(text, spans):
    """Return the text covered by each span."""
    clusters = _clusters(text)
    return [Gstr("".join(clusters[start:end])) for start, end in spans]


def _shape(key):
    if key.start is None and key.stop is None:
        return Unbounded()
    if key.stop is None:
        return From(key.start)
    if key.start is None:
        return UpTo(key.stop)
    return HalfOpen(key.start, key.stop)


class Gstr(str):
    def __new__(cls, content):
        return str.__new__(cls, content)

    def __len__(self):
        return grapheme.length(str(self))

    def __iter__(self):
        return grapheme.graphemes(str(self))

    def __getitem__(self, key):
        if isinstance(key, int):
            return element_at(self, key)
        elif isinstance(key, slice):
            if key.step not in (None, 1):
                return self.__class__("".join(self.graphemes()[key]))
            return slice_of(self, _shape(key))
        elif isinstance(key, tuple(indexing.RESOLVERS)):
            return slice_of(self, key)
        raise TypeError("Gstr indices must be integers, slices or range shapes, not {}".format(
            type(key).__name__))

    def __contains__(self, item):
        return grapheme.contains(str(self), item)

    def graphemes(self):
        return list(grapheme.graphemes(str(self)))

    def occurrences(self, pattern):
        return occurrences_of(self, pattern)

    def positions(self, character):
        return positions_of(self, character)

    def paired(self, begin, end, inclusive=True):
        return paired_ranges(self, begin, end, inclusive)

    def range_from(self, pattern):
        return range_from(self, pattern)

    def range_through(self, pattern):
        return range_through(self, pattern)
