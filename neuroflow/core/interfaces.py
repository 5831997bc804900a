"""
Protocol interfaces for persistable models.

Defines the contract a model must satisfy to be saved and restored by
:mod:`neuroflow.io`. The contract is structural: no base class is required,
any object with callable ``before`` and ``after`` methods qualifies.
"""

import inspect
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Transform(Protocol):
    """
    Lifecycle hooks run around (de)serialization.

    ``before`` normalizes the model right before it is encoded, typically by
    dropping transient state that can be recomputed (scratch buffers, caches,
    function references). ``after`` runs on a freshly decoded model and
    rebuilds that state. Both mutate the model in place and return nothing.
    Hooks are assumed infallible; anything they raise reaches the caller
    unchanged.
    """

    def before(self) -> None:
        """Prepare the model for encoding."""
        ...

    def after(self) -> None:
        """Restore derived state on a freshly decoded model."""
        ...


def is_transform(obj: Any) -> bool:
    """
    Check whether ``obj`` (an instance or a class) exposes both hooks.

    Args:
        obj: Model instance or model class

    Returns:
        True if ``before`` and ``after`` are present and callable
    """
    if inspect.isclass(obj):
        return all(callable(getattr(obj, name, None)) for name in ("before", "after"))
    return isinstance(obj, Transform) and callable(obj.before) and callable(obj.after)
