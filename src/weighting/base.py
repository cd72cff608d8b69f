"""
base.py (PURE)
- Transformer capability: fit / transform / fit_transform.
"""
from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class Transformer(Protocol):
    def fit(self, x) -> "Transformer": ...
    def transform(self, x): ...
    def fit_transform(self, x): ...
