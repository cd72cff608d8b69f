import pytest
from pydantic import ValidationError
from src.weighting.config import TfIdfConfig
from src.weighting.errors import InvalidArgument


def test_defaults():
    c = TfIdfConfig.build()
    assert (c.smooth_idf, c.norm, c.sublinear_tf, c.verbose) == (True, "l1", False, False)


def test_bad_values():
    with pytest.raises(InvalidArgument):
        TfIdfConfig.build(norm="l3")
    with pytest.raises(InvalidArgument):
        TfIdfConfig.build(smooth_idf="yes")


def test_frozen():
    c = TfIdfConfig.build(norm="l2")
    with pytest.raises(ValidationError):
        c.norm = "l1"
