"""Shared fixtures: a small sheet export built on the live header layout."""

from unittest.mock import Mock

import pytest

from helpers import CURRENT_ROW, OUTSIDE_ROW, PRIOR_ROW, make_csv


@pytest.fixture
def sample_csv() -> str:
    """Reports dated 05/03/2024, 10/03/2023 and 20/05/2024, in that order."""
    return make_csv([CURRENT_ROW, PRIOR_ROW, OUTSIDE_ROW])


@pytest.fixture
def http_response():
    """Factory for a fake requests.Response."""

    def _make(text: str = "", status_error: Exception | None = None):
        response = Mock()
        response.text = text
        response.headers = {"Content-Type": "text/csv; charset=utf-8"}
        response.raise_for_status = Mock(side_effect=status_error)
        return response

    return _make
