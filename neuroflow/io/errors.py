"""
Error taxonomy for model persistence.

Every failure raised by :mod:`neuroflow.io` is a :class:`PersistenceError`
tagged with the stage that failed. The lower-level exception is kept on
``cause`` (and chained as ``__cause__``) so callers can inspect it without
depending on the encoding library's own exception types.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    """Stage at which a persistence operation failed."""
    IO = "io"              # file could not be opened, read or written
    ENCODING = "encoding"  # bytes could not be produced from / parsed into a model
    JSON = "json"          # value could not be rendered as text


class PersistenceError(Exception):
    """
    Base class for save/load/export failures.

    Attributes
    ----------
    kind : ErrorKind
        Failing stage
    cause : BaseException or None
        Underlying exception raised by the file system or the encoder
    path : str or None
        File the operation was working on, if any
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.cause = cause
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class StorageError(PersistenceError):
    kind = ErrorKind.IO


class EncodingError(PersistenceError):
    kind = ErrorKind.ENCODING


class JsonError(PersistenceError):
    kind = ErrorKind.JSON
