"""
errors.py (PURE)
- Exceptions raised by the weighting transformers.
"""
from __future__ import annotations


class InvalidArgument(ValueError):
    """Bad configuration value or unsupported input matrix type."""


class NotFittedError(ValueError, AttributeError):
    """transform() called before fit()."""
