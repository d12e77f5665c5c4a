import pytest

from battlenet_api.core import ErrorType, HTTPError, Result


def test_success_carries_value():
    result = Result.success({"id": 1})

    assert result.is_success
    assert not result.is_failure
    assert result.value == {"id": 1}
    assert result.error is None


def test_failure_unwrap_raises_carried_error():
    error = HTTPError.of(ErrorType.UNAUTHORIZED)
    result = Result.failure(error)

    assert result.is_failure
    assert result.error is error
    with pytest.raises(HTTPError) as exc_info:
        result.unwrap()
    assert exc_info.value is error


def test_success_may_carry_none():
    result = Result.success(None)

    assert result.is_success
    assert result.unwrap() is None


def test_failure_requires_http_error():
    with pytest.raises(TypeError):
        Result.failure(ValueError("nope"))


def test_map_skips_failures():
    error = HTTPError.of(ErrorType.SERVER_ERROR)

    assert Result.success(2).map(lambda v: v * 2).value == 4
    assert Result.failure(error).map(lambda v: v * 2).error is error


def test_flat_map_chains_results():
    error = HTTPError.of(ErrorType.MALFORMED_BODY)

    chained = Result.success(1).flat_map(lambda v: Result.failure(error))

    assert chained.error is error
