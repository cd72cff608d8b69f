"""
storage.py
- Output utilities: timestamped folder, sparse count loading, npz + meta JSON dump.
"""
from __future__ import annotations
import datetime as dt, json, os
from typing import Dict
from scipy import sparse

def timestamp_dir(base: str = "data/tfidf") -> str:
    ts = dt.datetime.now().strftime("%Y%m%d-%H%M%S")
    out = f"{base}/{ts}"
    os.makedirs(out, exist_ok=True)
    return out

def load_counts(path: str) -> "sparse.spmatrix":
    if not os.path.exists(path):
        raise FileNotFoundError(f"count matrix not found: {path}")
    return sparse.load_npz(path)

def save_weighted(X: "sparse.spmatrix", name: str, out_dir: str) -> str:
    path = f"{out_dir}/X_tfidf_{name}.npz"
    sparse.save_npz(path, X)
    return path

def save_meta(meta: Dict, out_dir: str) -> str:
    path = f"{out_dir}/meta.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(meta, f, ensure_ascii=False, indent=2)
    return path
