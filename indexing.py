import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

# "positional" mirrors negative range bounds by position, "legacy" looks up the
# right-most cluster equal to the mirrored one.
NEGATIVE_BOUNDS = "positional"
MODES = ("positional", "legacy")

HalfOpen = namedtuple("HalfOpen", "lo hi")
Closed = namedtuple("Closed", "lo hi")
From = namedtuple("From", "lo")
UpTo = namedtuple("UpTo", "hi")
Through = namedtuple("Through", "hi")
Unbounded = namedtuple("Unbounded", "")


def _mirror(clusters, index):
    adjusted = abs(index) - 1
    if adjusted < len(clusters):
        return len(clusters) - 1 - adjusted
    return None


def resolve_index(clusters, index):
    """Return the position of the element at a logical index, or None."""
    if index >= 0:
        return index if index < len(clusters) else None
    return _mirror(clusters, index)


def resolve_bound(clusters, index, mode=None):
    """Return the position a logical range bound stands for, or None.

    Non-negative bounds may equal len(clusters). Negative bounds are mirrored
    from the end; in "legacy" mode the mirrored cluster is then looked up by
    value, and its right-most occurrence wins.
    """
    mode = mode or NEGATIVE_BOUNDS
    if mode not in MODES:
        raise ValueError("unknown negative bound mode: {!r}".format(mode))
    if index >= 0:
        return index if index <= len(clusters) else None
    position = _mirror(clusters, index)
    if position is None or mode == "positional":
        return position
    target = clusters[position]
    for i in range(len(clusters) - 1, -1, -1):
        if clusters[i] == target:
            return i


def _half_open(clusters, shape, mode):
    if shape.hi < shape.lo:
        return None
    start = resolve_bound(clusters, shape.lo, mode)
    if start is None:
        return None
    stop = start + (shape.hi - shape.lo)
    if stop > len(clusters):
        return None
    return start, stop


def _closed(clusters, shape, mode):
    if shape.lo >= 0 and shape.hi >= 0:
        start = resolve_bound(clusters, shape.lo, mode)
        last = None if start is None else start + (shape.hi - shape.lo)
    else:
        start = shape.lo if shape.lo >= 0 else resolve_bound(clusters, shape.lo, mode)
        last = shape.hi if shape.hi >= 0 else resolve_bound(clusters, shape.hi, mode)
    if start is None or last is None:
        return None
    if last <= start or last >= len(clusters):
        return None
    return start, last + 1


def _from(clusters, shape, mode):
    start = resolve_bound(clusters, shape.lo, mode)
    if start is None:
        return None
    return start, len(clusters)


def _up_to(clusters, shape, mode):
    stop = resolve_bound(clusters, shape.hi, mode)
    if stop is None:
        return None
    return 0, stop


def _through(clusters, shape, mode):
    last = resolve_bound(clusters, shape.hi, mode)
    if last is None or last >= len(clusters):
        return None
    return 0, last + 1


def _unbounded(clusters, shape, mode):
    return 0, len(clusters)


RESOLVERS = {
    HalfOpen: _half_open,
    Closed: _closed,
    From: _from,
    UpTo: _up_to,
    Through: _through,
    Unbounded: _unbounded,
}


def resolve_range(clusters, shape, mode=None):
    """Resolve a range shape to a half-open (start, stop) pair, or None."""
    try:
        resolver = RESOLVERS[type(shape)]
    except KeyError:
        raise TypeError("unsupported range shape: {!r}".format(shape)) from None
    bounds = resolver(clusters, shape, mode)
    if bounds is None:
        logger.debug("%r does not resolve within %d clusters", shape, len(clusters))
    return bounds
