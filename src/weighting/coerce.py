"""
coerce.py (PURE)
- Input matrix → canonical float64 CSC copy.
- Accepted: scipy.sparse matrix/array, 2-D numeric numpy array, numeric pandas DataFrame.
"""
from __future__ import annotations
import numpy as np
import pandas as pd
from scipy import sparse
from src.weighting.errors import InvalidArgument


def _from_frame(df: pd.DataFrame):
    if len(df.columns) and all(isinstance(t, pd.SparseDtype) for t in df.dtypes):
        # to_coo treats fill values as implicit zeros
        if all(t.fill_value == 0 for t in df.dtypes):
            return df.sparse.to_coo()
        return df.sparse.to_dense().to_numpy(dtype=np.float64)
    if not all(pd.api.types.is_numeric_dtype(t) for t in df.dtypes):
        raise InvalidArgument("DataFrame must have only numeric columns")
    return df.to_numpy(dtype=np.float64)


def coerce_matrix(x, verbose: bool = False) -> sparse.csc_matrix:
    """Return a fresh csc_matrix (float64, no stored zeros); never aliases ``x``."""
    src_name = type(x).__name__
    if sparse.issparse(x):
        m = x
    elif isinstance(x, np.ndarray):
        if x.ndim != 2:
            raise InvalidArgument(f"expected 2-D array, got {x.ndim}-D")
        if not (np.issubdtype(x.dtype, np.number) or x.dtype == np.bool_):
            raise InvalidArgument(f"non-numeric array dtype: {x.dtype}")
        m = x
    elif isinstance(x, pd.DataFrame):
        m = _from_frame(x)
    else:
        raise InvalidArgument(f"unsupported matrix type: {src_name}")

    out = sparse.csc_matrix(m, dtype=np.float64, copy=True)
    out.eliminate_zeros()
    if verbose and not (sparse.issparse(x) and x.format == "csc"):
        print(f"[COERCE] {src_name} -> csc_matrix shape={out.shape}")
    return out
