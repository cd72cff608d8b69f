"""
config.py (PURE)
- TF-IDF options, validated once at construction (pydantic), immutable after.
"""
from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError
from src.weighting.errors import InvalidArgument

Norm = Literal["l1", "l2", "none"]


class TfIdfConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    smooth_idf: StrictBool = True
    norm: Norm = "l1"
    sublinear_tf: StrictBool = False
    verbose: StrictBool = False

    @classmethod
    def build(cls, **kwargs) -> "TfIdfConfig":
        # pydantic errors surface as InvalidArgument for callers
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise InvalidArgument(str(e)) from e
