"""
Test configuration and fixtures for neuroflow tests.

Provides common fixtures, small Transform implementations with observable
hooks, and assertion helpers shared by all test modules. Model classes live
here at module level so pickle can import them when loading.
"""

import errno
import os
import threading

import numpy as np
import pytest

from neuroflow import FeedForward


@pytest.fixture
def random_seed():
    """Fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def architecture():
    """Two layers of widths [2, 2, 1]."""
    return [2, 2, 1]


@pytest.fixture
def deterministic_parameters():
    """Hand-picked weights and biases for a [2, 2, 1] network."""
    weights = [
        np.array([[0.5, -0.25], [0.75, 0.125]]),
        np.array([[-1.5, 2.0]]),
    ]
    biases = [
        np.array([0.1, -0.2]),
        np.array([0.3]),
    ]
    return weights, biases


@pytest.fixture
def network(architecture, deterministic_parameters):
    """FeedForward with deterministic parameters."""
    weights, biases = deterministic_parameters
    return FeedForward(architecture, activation="sigmoid").set_parameters(weights, biases)


@pytest.fixture
def model_path(tmp_path):
    """Destination file inside a per-test temporary directory."""
    return tmp_path / "test.flow"


class MarkerModel:
    """Transform whose hooks leave observable traces."""

    def __init__(self, values=(1.0, 2.0, 3.0), watch_path=None):
        self.values = list(values)
        self.marker = "constructed"
        self.watch_path = None if watch_path is None else str(watch_path)
        self.before_calls = 0
        self.after_calls = 0
        self.size_seen_by_before = None
        self.cache = None

    def before(self):
        self.before_calls += 1
        self.marker = "before"
        self.cache = None
        if self.watch_path is not None and os.path.exists(self.watch_path):
            self.size_seen_by_before = os.path.getsize(self.watch_path)

    def after(self):
        self.after_calls += 1
        self.marker = "after"
        self.cache = sum(self.values)


class OtherModel:
    """Unrelated Transform used for type-mismatch checks."""

    def __init__(self, name="other"):
        self.name = name

    def before(self):
        pass

    def after(self):
        pass


class UnencodableModel:
    """Transform holding a lock, which pickle refuses to encode."""

    def __init__(self):
        self.lock = threading.Lock()
        self.before_calls = 0

    def before(self):
        self.before_calls += 1

    def after(self):
        pass


class NoHooks:
    """Plain object without lifecycle hooks."""

    def __init__(self):
        self.values = [1, 2, 3]


def assert_parameters_equal(model, weights, biases):
    """Assert that a FeedForward holds exactly the given parameters."""
    assert len(model.weights) == len(weights)
    assert len(model.biases) == len(biases)
    for actual, expected in zip(model.weights, weights):
        np.testing.assert_array_equal(actual, expected)
    for actual, expected in zip(model.biases, biases):
        np.testing.assert_array_equal(actual, expected)


class CallableModel:
    """Transform with a forward pass and its own dict rendering."""

    def __init__(self, scale=2.0):
        self.scale = scale

    def __call__(self, x):
        return self.scale * x

    def to_dict(self):
        return {"scale": self.scale}

    def before(self):
        pass

    def after(self):
        pass


class RestoreFailsModel:
    """Transform whose unpickling raises OSError from __setstate__."""

    def __init__(self):
        self.values = [1, 2]

    def __setstate__(self, state):
        raise OSError("cannot attach device buffer")

    def before(self):
        pass

    def after(self):
        pass


class FullDiskWriter:
    """File stand-in that accepts writes and fails when flushed."""

    def __init__(self):
        self.closed = False

    def write(self, data):
        return len(data)

    def flush(self):
        raise OSError(errno.ENOSPC, "No space left on device")

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False
