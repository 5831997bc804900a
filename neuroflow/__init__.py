from .__about__ import __version__

from .core.interfaces import Transform, is_transform
from .activators import Activation, get_activation, list_activations
from .feedforward import FeedForward
from .config import PersistenceConfig, load_config
from .api.registry import register_model, get_model, list_models
from . import io

__all__ = [
    # Version
    "__version__",

    # Persistable model contract
    "Transform", "is_transform",

    # Reference model
    "FeedForward",
    "Activation", "get_activation", "list_activations",

    # Configuration
    "PersistenceConfig", "load_config",

    # Model registry
    "register_model", "get_model", "list_models",

    # Save / load / export
    "io",
]
