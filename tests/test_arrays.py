"""Tests for generic sequence helpers."""

import logging
import logging.config

import numpy as np
import pytest

from rami_utils.arrays import (
    expand_back,
    expand_front,
    join_to_string,
    slice_by_size,
    slice_range,
    write_subrange_into,
)
from rami_utils.config import BOUNDS_LOGGER_NAME, configure


def test_join_to_string():
    """Test elements are joined with a comma and space."""
    assert join_to_string([1, 2, 3]) == "1, 2, 3"
    assert join_to_string(["a", "b"]) == "a, b"


def test_join_to_string_empty():
    """Test an empty sequence gives an empty string."""
    assert join_to_string([]) == ""


def test_slice_range():
    """Test half-open slicing."""
    assert slice_range([10, 20, 30, 40], 1, 3) == [20, 30]


def test_slice_by_size():
    """Test slicing by element count."""
    assert slice_by_size([10, 20, 30, 40], 1, 2) == [20, 30]


def test_slice_range_keeps_container_kind():
    """Test tuples and arrays come back as tuples and arrays."""
    assert slice_range((1, 2, 3), 0, 2) == (1, 2)

    source = np.array([1.0, 2.0, 3.0])
    result = slice_range(source, 1, 3)
    result[0] = 99.0
    np.testing.assert_array_equal(source, [1.0, 2.0, 3.0])


@pytest.mark.parametrize("start,end", [(-1, 2), (2, 5)])
def test_slice_range_out_of_bounds(start, end):
    """Test slicing outside the source raises instead of clamping."""
    with pytest.raises(IndexError):
        slice_range([10, 20, 30, 40], start, end)


def test_slice_range_reversed():
    """Test a range ending before it starts is rejected."""
    with pytest.raises(ValueError):
        slice_range([10, 20, 30, 40], 3, 1)


def test_write_subrange_into():
    """Test source overwrites destination in place."""
    destination = [1, 2, 3, 4]
    result = write_subrange_into([9, 9], destination, 1)

    assert result == [1, 9, 9, 4]
    assert result is destination


def test_write_subrange_into_array():
    """Test writing into a numpy array."""
    destination = np.zeros(4)
    write_subrange_into([1.0, 2.0], destination, 2)
    np.testing.assert_array_equal(destination, [0.0, 0.0, 1.0, 2.0])


@pytest.mark.parametrize("start", [-1, 3])
def test_write_subrange_into_out_of_bounds(start):
    """Test overflowing writes raise and leave the length unchanged."""
    destination = [1, 2, 3, 4]
    with pytest.raises(IndexError):
        write_subrange_into([9, 9], destination, start)
    assert len(destination) == 4


def test_bounds_warning_logged_when_enabled(bounds_checks, caplog):
    """Test a warning precedes the failure when diagnostics are on."""
    with caplog.at_level(logging.WARNING, logger=BOUNDS_LOGGER_NAME):
        with pytest.raises(IndexError):
            write_subrange_into([9, 9], [1, 2, 3], 2)

    assert any(r.name == BOUNDS_LOGGER_NAME for r in caplog.records)


def test_bounds_warning_silent_when_disabled(caplog):
    """Test no warning is emitted with diagnostics off."""
    configure({"debug_bounds_checks": False})
    try:
        with caplog.at_level(logging.WARNING, logger=BOUNDS_LOGGER_NAME):
            with pytest.raises(IndexError):
                slice_range([1, 2, 3], 0, 4)
    finally:
        configure()

    assert not any(r.name == BOUNDS_LOGGER_NAME for r in caplog.records)


def test_expand_front():
    """Test fill values are placed before the source."""
    assert expand_front([1, 2], 2, 0) == [0, 0, 1, 2]


def test_expand_back():
    """Test fill values are placed after the source."""
    assert expand_back([1, 2], 2, 0) == [1, 2, 0, 0]


def test_expand_does_not_mutate_source():
    """Test expansion returns a new container."""
    source = [1, 2]
    expand_back(source, 1, 0)
    expand_front(source, 1, 0)
    assert source == [1, 2]


def test_expand_arrays_of_vectors():
    """Test expansion of an (N, 3) array pads whole rows."""
    source = np.ones((2, 3))
    result = expand_front(source, 1, 0.0)

    assert result.shape == (3, 3)
    np.testing.assert_array_equal(result[0], [0.0, 0.0, 0.0])
    np.testing.assert_array_equal(expand_back(np.array([1, 2]), 2, 7), [1, 2, 7, 7])


def test_expand_negative_count():
    """Test a negative count is rejected."""
    with pytest.raises(ValueError):
        expand_back([1, 2], -1, 0)


@pytest.fixture
def restore_logger_state():
    """Undo logger changes made by a host-style dictConfig call."""
    loggers = [logging.getLogger(name) for name in list(logging.root.manager.loggerDict)]
    disabled = {logger: logger.disabled for logger in loggers}
    yield
    for logger, state in disabled.items():
        logger.disabled = state


def test_bounds_warning_survives_host_dict_config(bounds_checks, restore_logger_state, caplog):
    """Test a host dictConfig that disables existing loggers keeps warnings on."""
    logging.config.dictConfig({"version": 1})

    with caplog.at_level(logging.WARNING, logger=BOUNDS_LOGGER_NAME):
        with pytest.raises(IndexError):
            write_subrange_into([9, 9], [1, 2, 3], 2)

    assert any(r.name == BOUNDS_LOGGER_NAME for r in caplog.records)


def test_bounds_warning_stays_off_after_host_dict_config(restore_logger_state, caplog):
    """Test a host dictConfig that re-enables loggers keeps warnings off."""
    configure({"debug_bounds_checks": False})
    try:
        logging.config.dictConfig({"version": 1, "disable_existing_loggers": False})
        with caplog.at_level(logging.WARNING, logger=BOUNDS_LOGGER_NAME):
            with pytest.raises(IndexError):
                slice_range([1, 2, 3], 0, 4)
    finally:
        configure()

    assert not any(r.name == BOUNDS_LOGGER_NAME for r in caplog.records)


def test_expand_array_promotes_fill_dtype():
    """Test a float fill on an int array is kept, not truncated."""
    result = expand_back(np.array([1, 2]), 1, 0.5)
    assert result[-1] == 0.5
    np.testing.assert_array_equal(result, [1.0, 2.0, 0.5])

    padded = expand_front(np.array([1, 2]), 2, np.nan)
    assert np.isnan(padded[:2]).all()
    np.testing.assert_array_equal(padded[2:], [1.0, 2.0])


def test_expand_array_keeps_dtype_for_compatible_fill():
    """Test a fill representable in the source dtype does not widen it."""
    source = np.array([1.0, 2.0], dtype=np.float32)
    assert expand_back(source, 2, 0).dtype == np.float32
    assert expand_back(np.array([1, 2]), 1, 7).dtype == np.array([1, 2]).dtype
