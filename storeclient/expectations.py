"""Assertion helpers for HTTP exchanges.

These helpers check a raw ``httpx.Response`` against an expected status
and a partial JSON shape. They raise ``AssertionError`` so that pytest
reports a mismatch as a failing test with a readable message.

Example:
    response = client.http.send("GET", "/products/1")
    expect_status(response, HTTPStatus.OK)
    expect_json_like(response, {"id": 1, "title": re.compile(r"\\S+")})
"""

import re
from http import HTTPStatus
from typing import Any

import httpx

# Longest body excerpt carried into assertion messages
BODY_EXCERPT_LENGTH = 300


def body_of(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or None for an empty body."""
    if not response.content:
        return None
    return response.json()


def _describe(response: httpx.Response) -> str:
    request = response.request
    return f"{request.method} {request.url}"


def expect_status(response: httpx.Response, expected: int | HTTPStatus) -> httpx.Response:
    """Assert the response carries the expected status code.

    Args:
        response: The response to check.
        expected: Expected status code.

    Returns:
        The response, so calls can be chained into body checks.
    """
    expected = HTTPStatus(expected)
    actual = response.status_code
    assert actual == expected, (
        f"{_describe(response)}: expected HTTP {expected.value} {expected.phrase}, "
        f"got HTTP {actual}; body: {response.text[:BODY_EXCERPT_LENGTH]!r}"
    )
    return response


def _list_like(actual: list[Any], expected: list[Any]) -> bool:
    # Each expected element claims a distinct actual element; a claim is
    # released when the rest of the expected elements cannot be placed
    if not expected:
        return True
    item, rest = expected[0], expected[1:]
    for index, candidate in enumerate(actual):
        if json_like(candidate, item) and _list_like(actual[:index] + actual[index + 1:], rest):
            return True
    return False


def json_like(actual: Any, expected: Any) -> bool:
    """Check whether ``actual`` contains the structure of ``expected``.

    Matching rules:
        - dict: every expected key is present and matches; extra keys are ignored
        - list: every expected element matches a distinct actual element,
          in any order
        - compiled regex: searched in ``str(actual)``
        - booleans: only match booleans, so ``True`` never matches ``1``
        - anything else: compared with ``==``

    Args:
        actual: Decoded JSON value from a response.
        expected: The partial shape to look for.

    Returns:
        True when ``actual`` matches ``expected``.
    """
    if isinstance(expected, re.Pattern):
        return actual is not None and expected.search(str(actual)) is not None
    if isinstance(expected, dict):
        if not isinstance(actual, dict):
            return False
        return all(
            key in actual and json_like(actual[key], value)
            for key, value in expected.items()
        )
    if isinstance(expected, list):
        if not isinstance(actual, list):
            return False
        return _list_like(actual, expected)
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(actual) is type(expected) and actual == expected
    return actual == expected


def expect_json_like(response_or_body: httpx.Response | Any, expected: Any) -> Any:
    """Assert a response body (or an already decoded body) is JSON-like ``expected``.

    Returns:
        The decoded body.
    """
    if isinstance(response_or_body, httpx.Response):
        body = body_of(response_or_body)
        where = _describe(response_or_body)
    else:
        body = response_or_body
        where = "body"
    assert json_like(body, expected), (
        f"{where}: {str(body)[:BODY_EXCERPT_LENGTH]} does not match {expected!r}"
    )
    return body


def expect_non_empty_list(response_or_body: httpx.Response | Any) -> list[Any]:
    """Assert a body is a JSON array with at least one element.

    Returns:
        The decoded list.
    """
    if isinstance(response_or_body, httpx.Response):
        body = body_of(response_or_body)
    else:
        body = response_or_body
    assert isinstance(body, list), f"expected a JSON array, got {type(body).__name__}"
    assert len(body) > 0, "expected a non-empty JSON array"
    return body
