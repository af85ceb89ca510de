from __future__ import annotations
import os
from typing import Optional
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError

DEFAULT_MAX_DEPTH = 128


class ParserSettings(BaseModel):
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)


def load_settings(max_depth: Optional[int] = None) -> ParserSettings:
    """Explicit arguments win over TNT_MAX_DEPTH, which wins over the default.

    Raises ConfigurationError for a non-positive or non-integer depth.
    """
    try:
        if max_depth is not None:
            return ParserSettings(max_depth=max_depth)
        env = os.getenv("TNT_MAX_DEPTH")
        if env:
            return ParserSettings.model_validate({"max_depth": env})
        return ParserSettings()
    except ValidationError as ex:
        source = "max_depth" if max_depth is not None else "TNT_MAX_DEPTH"
        raise ConfigurationError(f"invalid {source}: {ex.errors()[0]['msg']}") from ex
