import json
import numpy as np
import pytest
from scipy import sparse
from src.pipelines.tfidf_apply import run


def _save(path, arr):
    sparse.save_npz(path, sparse.csr_matrix(np.array(arr, dtype=float)))
    return str(path)


def test_run_writes_outputs(tmp_path, capsys):
    train = _save(tmp_path / "train.npz", [[2, 0, 1], [1, 1, 0], [0, 3, 0]])
    test = _save(tmp_path / "test.npz", [[1, 1, 1]])
    out = tmp_path / "out"
    meta = run(train, [test], str(out), smooth_idf=False, norm="l2")

    assert meta["dims"] == 3
    assert meta["config"] == {"smooth_idf": False, "norm": "l2", "sublinear_tf": False}
    assert meta["idf"]["inf_weights"] == 0
    X = sparse.load_npz(out / "X_tfidf_test.npz")
    assert X.shape == (1, 3)
    with open(out / "meta.json", "r", encoding="utf-8") as f:
        assert json.load(f)["outputs"]["train"]["rows"] == 3
    assert "[TFIDF] saved to" in capsys.readouterr().out


def test_run_rejects_empty_train(tmp_path):
    train = str(tmp_path / "empty.npz")
    sparse.save_npz(train, sparse.csr_matrix((0, 4)))
    with pytest.raises(SystemExit):
        run(train, outdir=str(tmp_path / "out"))


def test_run_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(str(tmp_path / "nope.npz"), outdir=str(tmp_path / "out"))


def test_run_same_basename_keeps_both_outputs(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    train = _save(tmp_path / "a" / "counts.npz", [[2, 0], [1, 1], [0, 3]])
    extra = _save(tmp_path / "b" / "counts.npz", [[1, 1]])
    out = tmp_path / "out"
    meta = run(train, [extra], str(out))

    assert set(meta["outputs"]) == {"counts", "counts_1"}
    assert meta["outputs"]["counts"]["rows"] == 3
    assert meta["outputs"]["counts"]["source"] == train
    assert meta["outputs"]["counts_1"]["source"] == extra
    assert sparse.load_npz(out / "X_tfidf_counts.npz").shape == (3, 2)
    assert sparse.load_npz(out / "X_tfidf_counts_1.npz").shape == (1, 2)
