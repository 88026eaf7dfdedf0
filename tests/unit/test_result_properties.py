"""Property-based checks of the Result laws over arbitrary payloads."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from tagged_result import ResultError, failure, is_failure, is_success, success

pytestmark = pytest.mark.unit

payloads = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=5),
    st.builds(ValueError, st.text(max_size=10)),
)
results = st.one_of(payloads.map(success), payloads.map(failure))

_settings = settings(max_examples=50, deadline=None, derandomize=True)


@given(result=results)
@_settings
def test_exactly_one_state_holds(result) -> None:
    """Property: is_success() and is_failure() are always complementary."""
    assert result.is_success() != result.is_failure()
    assert is_success(result) == result.is_success()
    assert is_failure(result) == result.is_failure()


@given(value=payloads, fallback=payloads)
@_settings
def test_success_laws(value, fallback) -> None:
    r = success(value)
    assert r.unwrap() is value
    assert r.unwrap_or(fallback) is value
    assert r.unwrap_tuple() == (value, None)
    with pytest.raises(ResultError):
        r.unwrap_error()


@given(error=payloads, fallback=payloads)
@_settings
def test_failure_laws(error, fallback) -> None:
    r = failure(error)
    assert r.unwrap_error() is error
    assert r.unwrap_or(fallback) is fallback
    assert r.unwrap_tuple()[0] is None
    assert r.unwrap_tuple()[1] is error
    with pytest.raises(ResultError):
        r.unwrap()


@given(value=st.integers())
@_settings
def test_map_applies_function_to_success(value: int) -> None:
    assert success(value).map(lambda x: x * 2 + 1).unwrap() == value * 2 + 1


@given(result=results)
@_settings
def test_match_agrees_with_unwrap_tuple(result) -> None:
    """Property: match picks the same payload slot unwrap_tuple fills."""
    tagged = result.match(
        on_success=lambda v: ("success", v), on_failure=lambda e: ("failure", e)
    )
    value, error = result.unwrap_tuple()
    if result.is_success():
        assert tagged == ("success", value)
        assert tagged[1] is value
    else:
        assert tagged == ("failure", error)
        assert tagged[1] is error
