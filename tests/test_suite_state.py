"""Unit tests for the SuiteState captured-value store."""

import pytest

from tests.fixtures.suite import SuiteState


class TestSuiteState:
    """Tests for capture/require between suite steps."""

    def test_capture_then_require(self):
        state = SuiteState()
        assert state.capture("created_product_id", 21) == 21
        assert state.require("created_product_id") == 21
        assert "created_product_id" in state

    def test_require_missing_skips(self):
        state = SuiteState()
        with pytest.raises(pytest.skip.Exception):
            state.require("created_product_id")

    def test_none_counts_as_missing(self):
        state = SuiteState()
        state.capture("first_product_id", None)
        assert "first_product_id" not in state
        with pytest.raises(pytest.skip.Exception):
            state.require("first_product_id")
