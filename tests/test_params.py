import pytest

from vecindex import params
from vecindex.params import is_metric_type


@pytest.mark.parametrize(
    "literal, constant",
    [
        ("L2", params.METRIC_L2),
        ("COSINE", params.METRIC_COSINE),
        ("k", params.META_TOPK),
        ("HNSW", params.INDEX_HNSW),
    ],
)
def test_metric_names_fixed_by_source(literal, constant):
    assert is_metric_type(literal, constant)
    assert is_metric_type(literal.lower(), constant)


@pytest.mark.parametrize("name", ["l2", "L2", "l2".upper()])
def test_is_metric_type_ignores_case(name):
    assert is_metric_type(name, params.METRIC_L2)


@pytest.mark.parametrize("name", ["cosine", "Cosine", "COSINE"])
def test_is_metric_type_cosine(name):
    assert is_metric_type(name, params.METRIC_COSINE)


def test_is_metric_type_rejects_other_metric():
    assert not is_metric_type("IP", params.METRIC_L2)


def test_is_metric_type_rejects_prefix():
    assert not is_metric_type("L", params.METRIC_L2)
    assert not is_metric_type("L2X", params.METRIC_L2)


def test_is_metric_type_is_symmetric():
    assert is_metric_type("jaccard", "JACCARD") == is_metric_type("JACCARD", "jaccard")