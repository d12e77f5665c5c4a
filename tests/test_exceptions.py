import pytest

from battlenet_api.core import ErrorType, HTTPError


@pytest.mark.parametrize("error_type, code", [
    (ErrorType.UNAUTHORIZED, 401),
    (ErrorType.FORBIDDEN, 403),
    (ErrorType.SERVER_ERROR, 599),
    (ErrorType.NO_NETWORK, 499),
    (ErrorType.MALFORMED_BODY, 499),
    (ErrorType.DESERIALIZATION_FAILURE, 499),
])
def test_default_codes(error_type, code):
    assert HTTPError.of(error_type).code == code


def test_from_status_keeps_server_code():
    assert HTTPError.from_status(401).type is ErrorType.UNAUTHORIZED
    assert HTTPError.from_status(403).type is ErrorType.FORBIDDEN

    error = HTTPError.from_status(404)
    assert error.type is ErrorType.SERVER_ERROR
    assert error.code == 404


def test_every_kind_has_descriptions():
    for error_type in ErrorType:
        assert error_type.description
        assert error_type.debug_description.startswith(f"DEBUG ({error_type.value})")


def test_custom_message_replaces_description():
    error = HTTPError.of(ErrorType.MALFORMED_BODY, "Must pass a value for id or slug")

    assert error.message == "Must pass a value for id or slug"
    assert str(error) == "Must pass a value for id or slug"


def test_display_message_in_debug_mode():
    error = HTTPError.of(ErrorType.NO_NETWORK)

    assert error.display_message() == ErrorType.NO_NETWORK.description
    assert error.debug_description in error.display_message(debug=True)


def test_to_dict_includes_type_and_code():
    data = HTTPError.from_status(500).to_dict()

    assert data["details"]["type"] == "server_error"
    assert data["details"]["code"] == 500
