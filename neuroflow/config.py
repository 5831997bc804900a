from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class PersistenceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    compress: int = Field(0, ge=0, le=9)       # joblib zlib level, 0 = raw pickle stream
    buffer_size: PositiveInt = 8192             # read buffer used by load()
    json_indent: Optional[int] = Field(None, ge=0)
    json_sort_keys: bool = False
    allow_nan: bool = True


DEFAULT_CONFIG = PersistenceConfig()


def load_config(path: Optional[Union[str, Path]]) -> PersistenceConfig:
    """
    Read a YAML mapping into a PersistenceConfig.

    An empty path or an empty document yields the defaults. Unknown or
    out-of-range values raise pydantic's ValidationError.
    """
    if not path:
        return PersistenceConfig()
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")
    return PersistenceConfig(**raw)
