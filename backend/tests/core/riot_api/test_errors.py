"""
Tests for pipeline error classification.
"""

import pytest

from riot_kernel.core.riot_api.errors import (
    BadRequestError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)


@pytest.mark.parametrize(
    "error_class,status",
    [
        (BadRequestError, 400),
        (NotFoundError, 404),
        (RateLimitError, 429),
        (DecodeError, 502),
        (ServiceUnavailableError, 503),
    ],
)
def test_default_status(error_class, status):
    assert error_class("boom").status_code == status


def test_explicit_status_wins():
    assert RiotAPIError("boom", status_code=500).status_code == 500
    assert RiotAPIError("boom").status_code is None


def test_str():
    assert str(NotFoundError("Resource not found")) == "Riot API Error 404: Resource not found"
    assert (
        str(RateLimitError("Rate limit exceeded", retry_after=3))
        == "Rate Limit Error 429: Rate limit exceeded (Retry after: 3s)"
    )
    assert str(RiotAPIError("Request failed")) == "Riot API Error: Request failed"
