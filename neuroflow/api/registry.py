"""
Named registry of model types.

Lets callers load a model by name (``io.load(path, "feedforward")``) instead
of importing its class. Supports both decorator and direct registration.
"""

import inspect
import warnings
from typing import Dict, List, Type, Union

from ..core.interfaces import is_transform

_MODELS: Dict[str, Type] = {}


def register_model(name: str, *, override: bool = False):
    """
    Register a model class under ``name``.

    Args:
        name: Unique model name
        override: Replace an existing registration without warning

    Returns:
        Decorator returning the class unchanged

    Raises:
        TypeError: If the class does not implement before()/after()

    Examples:
        @register_model("feedforward")
        class FeedForward: ...

        # Direct registration
        register_model("custom")(MyModel)
    """
    def decorator(cls: Type) -> Type:
        if not inspect.isclass(cls) or not is_transform(cls):
            raise TypeError(f"Model '{name}' must be a class implementing before()/after(), got {cls!r}")

        existing = _MODELS.get(name)
        if existing is not None and existing is not cls and not override:
            warnings.warn(
                f"Overriding existing model '{name}': {existing} -> {cls}. "
                f"Use override=True to suppress this warning."
            )

        _MODELS[name] = cls
        return cls

    return decorator


def get_model(name: str) -> Type:
    """
    Get a registered model class.

    Raises:
        KeyError: If no model is registered under ``name``
    """
    if name not in _MODELS:
        raise KeyError(f"No model named '{name}' found. Available: {list(_MODELS)}")
    return _MODELS[name]


def list_models() -> List[str]:
    return list(_MODELS.keys())


def unregister_model(name: str) -> bool:
    """Remove a model from the registry. Returns False if it was not registered."""
    return _MODELS.pop(name, None) is not None


def resolve_model_type(model_type: Union[Type, str]) -> Type:
    """
    Turn a class or a registered name into a model class.

    Raises:
        KeyError: If a name is not registered
        TypeError: If the class does not implement before()/after()
    """
    if isinstance(model_type, str):
        return get_model(model_type)
    if not inspect.isclass(model_type) or not is_transform(model_type):
        raise TypeError(f"{model_type!r} is not a model class implementing before()/after()")
    return model_type
