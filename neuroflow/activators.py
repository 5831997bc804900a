"""
Named activation functions with their derivatives.

Models store the activation by name and resolve the function pair at
runtime, so the callables themselves never need to be encoded.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List
import numpy as np


@dataclass(frozen=True)
class Activation:
    name: str
    func: Callable[[np.ndarray], np.ndarray]
    der: Callable[[np.ndarray], np.ndarray]   # derivative w.r.t. the pre-activation


def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))

def _sigmoid_der(x):
    s = _sigmoid(x)
    return s * (1.0 - s)

def _tanh_der(x):
    return 1.0 - np.tanh(x)**2

def _relu(x):
    return np.maximum(x, 0.0)

def _relu_der(x):
    return (np.asarray(x) > 0).astype(float)

def _linear(x):
    return np.asarray(x, float)

def _linear_der(x):
    return np.ones_like(np.asarray(x, float))


_ACTIVATIONS: Dict[str, Activation] = {
    "sigmoid": Activation("sigmoid", _sigmoid, _sigmoid_der),
    "tanh": Activation("tanh", np.tanh, _tanh_der),
    "relu": Activation("relu", _relu, _relu_der),
    "linear": Activation("linear", _linear, _linear_der),
}


def get_activation(name: str) -> Activation:
    """
    Look up an activation by name.

    Raises
    ------
    ValueError
        If the name is unknown
    """
    try:
        return _ACTIVATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown activation '{name}'. Available: {list_activations()}") from None


def list_activations() -> List[str]:
    return sorted(_ACTIVATIONS)
