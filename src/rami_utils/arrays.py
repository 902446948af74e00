"""Generic sequence helpers.

These work on lists, tuples and 1D/2D numpy arrays and return a container of
the same kind. Out-of-range indices raise ``IndexError`` rather than being
clamped or wrapped the way Python slicing would.
"""

import logging
from typing import Any, Iterable, Sequence

import numpy as np

from rami_utils.config import BOUNDS_LOGGER_NAME, bounds_checks_enabled

bounds_logger = logging.getLogger(BOUNDS_LOGGER_NAME)


def _warn_out_of_bounds(msg: str, *args) -> None:
    """Log a bounds warning if debug bounds checks are configured on."""
    if not bounds_checks_enabled():
        return
    if bounds_logger.getEffectiveLevel() > logging.WARNING:
        return

    # Host dictConfig calls may mark this logger disabled; the package flag decides
    fn, lno, func, sinfo = bounds_logger.findCaller()
    record = bounds_logger.makeRecord(
        bounds_logger.name, logging.WARNING, fn, lno, msg, args, None, func, None, sinfo
    )
    bounds_logger.callHandlers(record)


def join_to_string(sequence: Iterable[Any]) -> str:
    """Join the text form of every element with ", "."""
    return ", ".join(str(item) for item in sequence)


def write_subrange_into(source: Sequence, destination, start_index: int):
    """Copy ``source`` into ``destination`` starting at ``start_index``.

    Args:
        source: Elements to write
        destination: Mutable sequence or array, modified in place
        start_index: First index of ``destination`` to overwrite

    Returns:
        ``destination``, for chaining

    Raises:
        IndexError: If the write would fall outside ``destination``
    """
    end_index = start_index + len(source)
    if start_index < 0 or end_index > len(destination):
        _warn_out_of_bounds(
            "write_subrange_into: writing %d elements at index %d overflows "
            "destination of length %d",
            len(source),
            start_index,
            len(destination),
        )
        raise IndexError(
            f"Range [{start_index}, {end_index}) out of bounds for length "
            f"{len(destination)}"
        )

    destination[start_index:end_index] = source
    return destination


def slice_range(source: Sequence, start_index: int, end_index: int):
    """Copy of the elements in ``[start_index, end_index)``.

    Raises:
        IndexError: If the range falls outside ``source``
        ValueError: If ``end_index`` precedes ``start_index``
    """
    if start_index < 0 or end_index > len(source):
        _warn_out_of_bounds(
            "slice_range: range [%d, %d) exceeds source of length %d",
            start_index,
            end_index,
            len(source),
        )
        raise IndexError(
            f"Range [{start_index}, {end_index}) out of bounds for length "
            f"{len(source)}"
        )
    if end_index < start_index:
        raise ValueError(
            f"end_index {end_index} precedes start_index {start_index}"
        )

    if isinstance(source, np.ndarray):
        return source[start_index:end_index].copy()
    return source[start_index:end_index]


def slice_by_size(source: Sequence, start_index: int, size: int):
    """Copy of ``size`` elements starting at ``start_index``."""
    return slice_range(source, start_index, start_index + size)


def _promoted_dtype(source: np.ndarray, fill_value) -> np.dtype:
    """Smallest dtype holding both the source elements and ``fill_value``."""
    if isinstance(fill_value, (bool, int, float, complex, np.generic)):
        return np.result_type(source, fill_value)
    return np.result_type(source, np.asarray(fill_value))


def _fill(source: Sequence, count: int, fill_value):
    """Build ``count`` copies of ``fill_value`` in the container kind of ``source``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if isinstance(source, np.ndarray):
        return np.full(
            (count,) + source.shape[1:], fill_value, dtype=_promoted_dtype(source, fill_value)
        )
    return type(source)([fill_value] * count)


def expand_front(source: Sequence, count: int, fill_value):
    """Prepend ``count`` copies of ``fill_value`` to a copy of ``source``.

    Args:
        source: Original elements
        count: Number of fill slots to add
        fill_value: Value placed in each new slot

    Returns:
        New container of length ``len(source) + count``

    Raises:
        ValueError: If ``count`` is negative
    """
    padding = _fill(source, count, fill_value)
    if isinstance(source, np.ndarray):
        return np.concatenate([padding, source])
    return padding + type(source)(source)


def expand_back(source: Sequence, count: int, fill_value):
    """Append ``count`` copies of ``fill_value`` to a copy of ``source``."""
    padding = _fill(source, count, fill_value)
    if isinstance(source, np.ndarray):
        return np.concatenate([source, padding])
    return type(source)(source) + padding
