from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import numpy as np

from .activators import Activation, get_activation
from .api.registry import register_model


@register_model("feedforward")
class FeedForward:
    """
    Parameters of a fully connected feed-forward network.

    Holds the architecture, weights and biases of the network plus transient
    working state (activation function pair, per-layer output and delta
    buffers, previous weight updates for momentum). Training and inference
    are not part of this class.

    Persistence hooks:
    - before(): drops the transient state so only parameters are encoded
    - after(): rebuilds it from the architecture and activation name

    Parameters
    ----------
    architecture : sequence of int
        Layer widths, input layer first, e.g. [2, 2, 1]
    activation : str, default='tanh'
        Name of the activation used by every non-input layer
    learning_rate : float, default=0.1
    momentum : float, default=0.1
    seed : int, optional
        Seed for the uniform(-1, 1) parameter initialisation
    """

    def __init__(self, architecture: Sequence[int], activation: str = "tanh",
                 learning_rate: float = 0.1, momentum: float = 0.1, seed: Optional[int] = None):
        layers = [int(n) for n in architecture]
        if len(layers) < 2:
            raise ValueError("architecture needs at least an input and an output layer")
        if min(layers) < 1:
            raise ValueError(f"layer widths must be positive, got {layers}")

        self.layers = layers
        self.activation_name = get_activation(activation).name
        self.learning_rate = float(learning_rate)
        self.momentum = float(momentum)

        rng = np.random.default_rng(seed)
        self.weights = [rng.uniform(-1.0, 1.0, size=(n_out, n_in))
                        for n_in, n_out in zip(layers[:-1], layers[1:])]
        self.biases = [rng.uniform(-1.0, 1.0, size=n_out) for n_out in layers[1:]]

        self.state = "new"
        self._activation: Optional[Activation] = None
        self._allocate_buffers()

    def _allocate_buffers(self):
        self.outputs = [np.zeros(n) for n in self.layers]
        self.deltas = [np.zeros(n) for n in self.layers[1:]]
        self.previous_updates = [np.zeros_like(w) for w in self.weights]

    @property
    def activation(self) -> Activation:
        if self._activation is None:
            self._activation = get_activation(self.activation_name)
        return self._activation

    @property
    def n_parameters(self) -> int:
        return int(sum(w.size for w in self.weights) + sum(b.size for b in self.biases))

    def parameters(self) -> Tuple[List[np.ndarray], List[np.ndarray]]:
        """Copies of (weights, biases), one array per non-input layer."""
        return [w.copy() for w in self.weights], [b.copy() for b in self.biases]

    def set_parameters(self, weights: Sequence[np.ndarray], biases: Sequence[np.ndarray]) -> "FeedForward":
        """
        Replace all weights and biases.

        Raises
        ------
        ValueError
            If the number of layers or any array shape does not match
            the architecture
        """
        weights = [np.array(w, dtype=float) for w in weights]
        biases = [np.array(b, dtype=float) for b in biases]
        if len(weights) != len(self.weights) or len(biases) != len(self.biases):
            raise ValueError(f"expected {len(self.weights)} weight and bias arrays, "
                             f"got {len(weights)} and {len(biases)}")
        for i, (w, b) in enumerate(zip(weights, biases)):
            if w.shape != self.weights[i].shape:
                raise ValueError(f"weights[{i}] must have shape {self.weights[i].shape}, got {w.shape}")
            if b.shape != self.biases[i].shape:
                raise ValueError(f"biases[{i}] must have shape {self.biases[i].shape}, got {b.shape}")
        self.weights = weights
        self.biases = biases
        self.previous_updates = [np.zeros_like(w) for w in weights]
        return self

    def before(self):
        self._activation = None
        self.outputs = None
        self.deltas = None
        self.previous_updates = None
        self.state = "saved"

    def after(self):
        self._activation = get_activation(self.activation_name)
        self._allocate_buffers()
        self.state = "loaded"

    def to_dict(self) -> dict:
        return {
            "layers": list(self.layers),
            "activation": self.activation_name,
            "learning_rate": self.learning_rate,
            "momentum": self.momentum,
            "weights": [w.tolist() for w in self.weights],
            "biases": [b.tolist() for b in self.biases],
            "state": self.state,
        }

    def __repr__(self):
        return (f"FeedForward(architecture={self.layers}, activation='{self.activation_name}', "
                f"learning_rate={self.learning_rate}, momentum={self.momentum})")
