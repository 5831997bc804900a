"""
Input/output for models: save a model to a file and load it back.

Example
-------
>>> from neuroflow import FeedForward, io
>>> nn = FeedForward([2, 2, 1])
>>> io.save(nn, "test.flow")
>>> restored = io.load_or("test.flow", FeedForward, lambda: FeedForward([2, 2, 1]))
"""

from .errors import ErrorKind, PersistenceError, StorageError, EncodingError, JsonError
from .persistence import save, load, load_or, encode, decode
from .export import to_json, from_json

__all__ = [
    "save", "load", "load_or", "encode", "decode",
    "to_json", "from_json",
    "ErrorKind", "PersistenceError", "StorageError", "EncodingError", "JsonError",
]
