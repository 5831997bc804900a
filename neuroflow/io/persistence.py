"""
Saving and restoring models as binary files.

A model is anything implementing :class:`~neuroflow.core.interfaces.Transform`.
The persistence layer never looks inside it: ``before`` is called, the whole
object is handed to joblib, and the resulting bytes are written as-is. Loading
reverses the chain and finishes with ``after``.

Files are joblib pickles. Loading a file executes pickle opcodes, so only
load files you produced yourself or otherwise trust.
"""

import io
import logging
from pathlib import Path
from typing import Any, Callable, Optional, Type, TypeVar, Union

import joblib

from ..api.registry import resolve_model_type
from ..config import DEFAULT_CONFIG, PersistenceConfig
from ..core.interfaces import is_transform
from .errors import EncodingError, PersistenceError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, Path]


def encode(obj: Any, compress: int = 0) -> bytes:
    """
    Encode ``obj`` into a standalone byte buffer.

    Args:
        obj: Any picklable value
        compress: joblib zlib level (0 disables compression)

    Returns:
        The encoded bytes

    Raises:
        EncodingError: If the value cannot be pickled
    """
    buffer = io.BytesIO()
    try:
        joblib.dump(obj, buffer, compress=compress)
    except Exception as e:
        raise EncodingError(f"Cannot encode {type(obj).__name__}", cause=e) from e
    return buffer.getvalue()


def decode(stream: io.BufferedIOBase) -> Any:
    """
    Decode one value from a readable binary stream.

    Everything the decoder raises is a content failure, including an OSError
    coming out of a model's own __setstate__. Callers that need read failures
    reported separately read the bytes first, as load() does.

    Raises:
        EncodingError: If the bytes are empty, truncated or malformed
    """
    try:
        return joblib.load(stream)
    except Exception as e:
        raise EncodingError("Cannot decode model", cause=e) from e


def save(obj: Any, file_path: PathLike, config: Optional[PersistenceConfig] = None) -> None:
    """
    Save a model to ``file_path``.

    The destination is created (or truncated) first, then ``obj.before()``
    runs, then the model is encoded in memory and written in a single pass.
    If encoding fails nothing is written, so the file is left empty.

    Parameters
    ----------
    obj : Transform
        Model to save; mutated in place by its ``before`` hook
    file_path : str or Path
        Destination file
    config : PersistenceConfig, optional
        Compression settings; defaults to ``DEFAULT_CONFIG``

    Raises
    ------
    TypeError
        If ``obj`` does not implement the ``before``/``after`` hooks
    StorageError
        If the file cannot be created or written
    EncodingError
        If the model cannot be encoded

    Examples
    --------
    >>> from neuroflow import FeedForward, io
    >>> nn = FeedForward([2, 2, 1])
    >>> io.save(nn, "test.flow")
    """
    if not is_transform(obj):
        raise TypeError(f"{type(obj).__name__} does not implement before()/after()")
    config = config or DEFAULT_CONFIG

    try:
        fh = open(file_path, "wb")
    except OSError as e:
        raise StorageError(f"Cannot create {file_path}", cause=e, path=file_path) from e

    with fh:
        obj.before()
        try:
            encoded = encode(obj, compress=config.compress)
        except EncodingError as e:
            e.path = str(file_path)
            raise

        try:
            fh.write(encoded)
            fh.flush()
        except OSError as e:
            raise StorageError(f"Cannot write {file_path}", cause=e, path=file_path) from e

    logger.debug("Saved %s to %s (%d bytes)", type(obj).__name__, file_path, len(encoded))


def load(file_path: PathLike, model_type: Union[Type[T], str],
         config: Optional[PersistenceConfig] = None) -> T:
    """
    Load a model of ``model_type`` from ``file_path``.

    Parameters
    ----------
    file_path : str or Path
        Source file written by :func:`save`
    model_type : type or str
        Expected model class, or the name it was registered under
    config : PersistenceConfig, optional
        Read buffer settings; defaults to ``DEFAULT_CONFIG``

    Returns
    -------
    model : model_type
        Decoded model, after its ``after`` hook has run

    Raises
    ------
    KeyError
        If ``model_type`` is a name that is not registered
    TypeError
        If ``model_type`` does not implement the hooks
    StorageError
        If the file cannot be opened or read
    EncodingError
        If the content is malformed, truncated, or holds another type

    Examples
    --------
    >>> from neuroflow import FeedForward, io
    >>> nn = io.load("test.flow", FeedForward)
    """
    cls = resolve_model_type(model_type)
    config = config or DEFAULT_CONFIG

    try:
        raw = open(file_path, "rb", buffering=0)
    except OSError as e:
        raise StorageError(f"Cannot open {file_path}", cause=e, path=file_path) from e

    with io.BufferedReader(raw, buffer_size=config.buffer_size) as buf:
        try:
            data = buf.read()
        except OSError as e:
            raise StorageError(f"Cannot read {file_path}", cause=e, path=file_path) from e

    try:
        model = decode(io.BytesIO(data))
    except EncodingError as e:
        e.path = str(file_path)
        raise

    if not isinstance(model, cls):
        mismatch = TypeError(f"expected {cls.__name__}, found {type(model).__name__}")
        raise EncodingError(f"{file_path} does not hold a {cls.__name__}",
                            cause=mismatch, path=file_path) from mismatch

    model.after()
    logger.debug("Loaded %s from %s", cls.__name__, file_path)
    return model


def load_or(file_path: PathLike, model_type: Union[Type[T], str],
            default: Callable[[], T], config: Optional[PersistenceConfig] = None) -> T:
    """
    Load a model, falling back to ``default()`` on any persistence failure.

    Only :class:`PersistenceError` triggers the fallback; misuse such as an
    unknown ``model_type`` still raises.

    Examples
    --------
    >>> nn = load_or("test.flow", FeedForward, lambda: FeedForward([2, 2, 1]))
    """
    try:
        return load(file_path, model_type, config=config)
    except PersistenceError as e:
        logger.debug("Falling back to a default %s: %s", getattr(model_type, "__name__", model_type), e)
        return default()
