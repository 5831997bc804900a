"""
Text export of models and other values.

Export is one-way. :func:`from_json` is part of the public surface but does
not decode anything yet; models are restored from the binary format only.
"""

import json
from typing import Any, Optional

import numpy as np

from ..config import DEFAULT_CONFIG, PersistenceConfig
from .errors import JsonError


def to_json(obj: Any, config: Optional[PersistenceConfig] = None) -> str:
    """
    Render ``obj`` as a JSON string.

    No lifecycle hooks run. numpy arrays become nested lists, numpy scalars
    become Python numbers, objects providing ``to_dict()`` are rendered from
    it and other objects from their ``__dict__``.

    Args:
        obj: Value to render
        config: Indentation, key ordering and NaN handling

    Returns:
        JSON text; identical for equal inputs and equal config

    Raises:
        JsonError: If some part of the value cannot be rendered
    """
    config = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            obj,
            default=_json_serialize_helper,
            indent=config.json_indent,
            sort_keys=config.json_sort_keys,
            allow_nan=config.allow_nan,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise JsonError(f"Cannot render {type(obj).__name__} as JSON", cause=e) from e


def from_json(s: str) -> Any:
    """Reserved for JSON import. Not implemented: always raises."""
    raise NotImplementedError(
        "Decoding models from JSON is not supported; use neuroflow.io.load on a saved file"
    )


def _json_serialize_helper(obj):
    """Helper for JSON serialization of numpy types and plain objects."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.bool_):
        return bool(obj)
    elif isinstance(obj, type):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    elif callable(getattr(obj, "to_dict", None)):
        return obj.to_dict()
    elif hasattr(obj, "__dict__") and not callable(obj):
        return vars(obj)
    else:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
