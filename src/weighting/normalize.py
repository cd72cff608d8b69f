"""
normalize.py (PURE)
- TF scaling and per-document row normalization over CSC matrices.
- Non-finite values (e.g. log of a negative hashed count) propagate, never raise.
"""
from __future__ import annotations
import numpy as np
from scipy import sparse
from sklearn.utils.sparsefuncs import inplace_row_scale
from src.weighting.errors import InvalidArgument

NORMS = ("l1", "l2", "none")


def sublinear_tf(x: sparse.csc_matrix) -> sparse.csc_matrix:
    # only stored entries are touched; implicit zeros stay 0
    out = x.copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        out.data = 1.0 + np.log(out.data)
    return out


def row_norms(x: sparse.csc_matrix, norm: str) -> np.ndarray:
    if norm == "l1":
        return np.asarray(abs(x).sum(axis=1)).ravel()
    if norm == "l2":
        return np.sqrt(np.asarray(x.multiply(x).sum(axis=1)).ravel())
    raise InvalidArgument(f"no row norm for {norm!r}")


def normalize_rows(x: sparse.csc_matrix, norm: str = "l1") -> sparse.csc_matrix:
    """
    l1: row / sum(|row|), l2: row / ||row||_2, none: unchanged copy.
    All-zero rows are left as they are.
    """
    if norm not in NORMS:
        raise InvalidArgument(f"unknown norm: {norm!r}")
    out = x.copy()
    if norm == "none":
        return out
    n = row_norms(out, norm)
    n[n == 0.0] = 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        inplace_row_scale(out, 1.0 / n)
    return out
