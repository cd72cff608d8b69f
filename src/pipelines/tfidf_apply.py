"""
tfidf_apply.py
- Load count matrices (.npz) → fit TF-IDF on train → transform train (+ extra) → save npz + meta.json
- Saves weighted matrices only; the fitted transformer itself is not persisted.

Usage:
  python -m src.pipelines.tfidf_apply --train data/counts_train.npz --apply data/counts_test.npz --norm l2
"""
from __future__ import annotations
import argparse, os
from typing import Dict, List, Optional
import numpy as np
from src.io_utils.storage import timestamp_dir, load_counts, save_weighted, save_meta
from src.weighting.tfidf import TfIdfTransformer


def _name(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]

def _unique_names(paths: List[str]) -> List[str]:
    # same basename from different dirs gets a _1, _2, ... suffix
    names, seen = [], set()
    for p in paths:
        base = name = _name(p)
        i = 0
        while name in seen:
            i += 1
            name = f"{base}_{i}"
        seen.add(name)
        names.append(name)
    return names

def _idf_stats(idf: np.ndarray) -> Dict:
    finite = idf[np.isfinite(idf)]
    return {
        "terms": int(idf.size),
        "inf_weights": int(np.isinf(idf).sum()),
        "min": float(finite.min()) if finite.size else None,
        "mean": float(finite.mean()) if finite.size else None,
        "max": float(finite.max()) if finite.size else None,
    }


def run(train: str, apply: Optional[List[str]] = None, outdir: Optional[str] = None,
        smooth_idf: bool = True, norm: str = "l1", sublinear_tf: bool = False,
        verbose: bool = False) -> Dict:
    # 1. 학습 행렬
    X_train = load_counts(train)
    if X_train.shape[0] == 0:
        raise SystemExit(f"Empty count matrix: {train}")

    # 2. fit + transform
    model = TfIdfTransformer(smooth_idf=smooth_idf, norm=norm,
                             sublinear_tf=sublinear_tf, verbose=verbose)
    out = outdir or timestamp_dir()
    os.makedirs(out, exist_ok=True)

    names = _unique_names([train] + list(apply or []))
    outputs = {}
    W = model.fit_transform(X_train)
    outputs[names[0]] = {"source": train, "path": save_weighted(W, names[0], out),
                         "rows": int(W.shape[0]), "nnz": int(W.nnz)}

    # 3. 추가 행렬은 학습된 IDF로만 변환
    for p, name in zip(apply or [], names[1:]):
        W = model.transform(load_counts(p))
        outputs[name] = {"source": p, "path": save_weighted(W, name, out),
                         "rows": int(W.shape[0]), "nnz": int(W.nnz)}

    # 4. 메타
    meta = {
        "train": train,
        "config": model.config.model_dump(exclude={"verbose"}),
        "dims": int(X_train.shape[1]),
        "idf": _idf_stats(model.idf_),
        "outputs": outputs,
    }
    save_meta(meta, out)
    print(f"[TFIDF] saved to {out}/ (docs={X_train.shape[0]}, dims={X_train.shape[1]}, files={len(outputs)})")
    return meta


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Fit TF-IDF on a count matrix and weight it (plus extra matrices)")
    ap.add_argument("--train", required=True, help="training count matrix (.npz)")
    ap.add_argument("--apply", nargs="*", default=[], help="extra count matrices to transform")
    ap.add_argument("--outdir", default=None)
    ap.add_argument("--smooth-idf", dest="smooth_idf", action=argparse.BooleanOptionalAction, default=True)
    ap.add_argument("--norm", default="l1", choices=["l1", "l2", "none"])
    ap.add_argument("--sublinear-tf", action="store_true")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    run(args.train, args.apply, args.outdir, args.smooth_idf, args.norm, args.sublinear_tf, args.verbose)
