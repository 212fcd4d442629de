"""Tests for _dataframe.py."""

import numpy as np
import pandas as pd
import pytest

from epiutils.errors import InvalidArgumentError
from epiutils.sampling._dataframe import eligible_mask, sample_df


@pytest.fixture
def nodes():
    return pd.DataFrame({
        "ids": [1, 2, 3, 4, 5, 6],
        "group": [1, 1, 1, 2, 2, 2],
        "status": ["s", "i", "s", "s", "i", "r"],
    })


class TestEligibleMask:
    def test_both_filters(self, nodes):
        mask = eligible_mask(nodes, group=1, status="s")
        assert nodes["ids"][mask].tolist() == [1, 3]

    def test_status_only(self, nodes):
        mask = eligible_mask(nodes, status=["i", "r"])
        assert nodes["ids"][mask].tolist() == [2, 5, 6]

    def test_group_only(self, nodes):
        mask = eligible_mask(nodes, group=[2])
        assert nodes["ids"][mask].tolist() == [4, 5, 6]

    def test_no_filters(self, nodes):
        assert eligible_mask(nodes).all()

    def test_missing_column(self, nodes):
        with pytest.raises(InvalidArgumentError):
            eligible_mask(nodes.drop(columns="status"), status="s")


class TestSampleDf:
    def test_draw_from_pool(self, nodes):
        out = sample_df(nodes, 2, group=2, rng=0)
        assert len(out) == 2
        assert set(out.tolist()) <= {4, 5, 6}
        assert len(set(out.tolist())) == 2

    def test_draw_all_rows(self, nodes):
        out = sample_df(nodes, 6, rng=0)
        assert sorted(out.tolist()) == [1, 2, 3, 4, 5, 6]

    def test_single_eligible_returned_regardless_of_size(self, nodes):
        # Pool {6}: a range-style draw would yield values from 0..5.
        out = sample_df(nodes, 3, status="r")
        assert out.tolist() == [6]

    def test_single_eligible_size_zero(self, nodes):
        assert len(sample_df(nodes, 0, status="r")) == 0

    def test_empty_pool_size_zero(self, nodes):
        assert len(sample_df(nodes, 0, group=3)) == 0

    def test_empty_pool_positive_size(self, nodes):
        with pytest.raises(InvalidArgumentError):
            sample_df(nodes, 1, group=3)

    def test_oversized_without_replacement(self, nodes):
        with pytest.raises(InvalidArgumentError):
            sample_df(nodes, 4, group=1)

    def test_replacement_allows_oversize(self, nodes):
        out = sample_df(nodes, 10, replace=True, group=1, rng=0)
        assert len(out) == 10
        assert set(out.tolist()) <= {1, 2, 3}

    def test_prob_aligned_with_pool(self, nodes):
        out = sample_df(nodes, 5, replace=True, prob=[0, 0, 1], group=2, rng=0)
        assert out.tolist() == [6] * 5

    def test_prob_aligned_with_rows(self, nodes):
        prob = [1, 0, 0, 0, 0, 1]
        out = sample_df(nodes, 2, prob=prob, status=["s", "r"], rng=0)
        assert sorted(out.tolist()) == [1, 6]

    def test_custom_columns(self):
        df = pd.DataFrame({"node": ["a", "b", "c"], "sex": ["f", "m", "f"]})
        out = sample_df(df, 2, group="f", id_col="node", group_col="sex", rng=0)
        assert sorted(out.tolist()) == ["a", "c"]

    def test_missing_id_column(self, nodes):
        with pytest.raises(InvalidArgumentError):
            sample_df(nodes, 1, id_col="node_id")

    def test_reproducible(self, nodes):
        a = sample_df(nodes, 3, rng=np.random.default_rng(5))
        b = sample_df(nodes, 3, rng=np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)
