"""
tfidf.py (PURE)
- TF-IDF weighting over a sparse document-term count matrix (rows=docs, cols=terms).
- fit: learn per-term IDF from document frequencies.
- transform: (sublinear TF) → row normalization → × diag(IDF).

    idf(t) = log(D / (df(t) + 1))   smooth_idf=True
    idf(t) = log(D / df(t))         smooth_idf=False  (df=0 gives +inf)
"""
from __future__ import annotations
import numpy as np
from scipy import sparse
from src.weighting.coerce import coerce_matrix
from src.weighting.config import TfIdfConfig
from src.weighting.errors import NotFittedError
from src.weighting.normalize import normalize_rows, sublinear_tf


def document_frequency(x: sparse.csc_matrix) -> np.ndarray:
    # abs(sign) so signed (hashed) counts still mean "term present"
    return np.asarray(abs(x.sign()).sum(axis=0), dtype=np.float64).ravel()


def compute_idf(x: sparse.csc_matrix, smooth_idf: bool = True) -> np.ndarray:
    n_docs = float(x.shape[0])
    df = document_frequency(x)
    if smooth_idf:
        df = df + 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(n_docs / df)


class TfIdfTransformer:
    def __init__(self, smooth_idf: bool = True, norm: str = "l1",
                 sublinear_tf: bool = False, verbose: bool = False):
        self.config = TfIdfConfig.build(
            smooth_idf=smooth_idf, norm=norm, sublinear_tf=sublinear_tf, verbose=verbose
        )
        self._idf: sparse.csc_matrix | None = None
        self._fitted = False

    @property
    def is_fitted(self) -> bool:
        return self._fitted

    @property
    def idf_(self) -> np.ndarray:
        if not self._fitted:
            raise NotFittedError("Fit the model first!")
        return self._idf.diagonal().copy()

    def _prepare(self, m: sparse.csc_matrix) -> sparse.csc_matrix:
        cfg = self.config
        if cfg.sublinear_tf:
            m = sublinear_tf(m)
        return normalize_rows(m, cfg.norm)

    def _fit(self, m: sparse.csc_matrix) -> None:
        idf = compute_idf(m, smooth_idf=self.config.smooth_idf)
        diag = sparse.diags(idf, format="csc")
        # swap only after everything above succeeded
        self._idf, self._fitted = diag, True
        if self.config.verbose:
            print(f"[TFIDF] fit docs={m.shape[0]} terms={m.shape[1]} "
                  f"inf_weights={int(np.isinf(idf).sum())}")

    def _weight(self, m: sparse.csc_matrix) -> sparse.csc_matrix:
        # a column-count mismatch fails in scipy's matmul (ValueError)
        return sparse.csc_matrix(self._prepare(m) @ self._idf)

    def fit(self, x) -> "TfIdfTransformer":
        self._fit(coerce_matrix(x, verbose=self.config.verbose))
        return self

    def transform(self, x) -> sparse.csc_matrix:
        if not self._fitted:
            raise NotFittedError("Fit the model first!")
        return self._weight(coerce_matrix(x, verbose=self.config.verbose))

    def fit_transform(self, x) -> sparse.csc_matrix:
        # fit(x).transform(x) with a single coercion
        m = coerce_matrix(x, verbose=self.config.verbose)
        self._fit(m)
        return self._weight(m)

    def __repr__(self) -> str:
        c = self.config
        return (f"TfIdfTransformer(smooth_idf={c.smooth_idf}, norm={c.norm!r}, "
                f"sublinear_tf={c.sublinear_tf})")
