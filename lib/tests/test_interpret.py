import pytest

from realm_client.errors import (
    ApiError,
    MalformedResponseError,
    RequestError,
    Server5xxError,
    ServerError,
    UnexpectedHttpStatusError,
)
from realm_client.interpret import interpret_api_response


def test_success_returns_data() -> None:
    data = {"result": "success", "msg": ""}
    assert interpret_api_response(200, data) is data


def test_success_without_json_is_malformed() -> None:
    with pytest.raises(MalformedResponseError) as exc:
        interpret_api_response(204, None)
    assert exc.value.http_status == 204
    assert isinstance(exc.value, ServerError)


def test_client_error_with_api_shape_raises_api_error() -> None:
    with pytest.raises(ApiError) as exc:
        interpret_api_response(400, {"result": "error", "msg": "Invalid stream", "code": "STREAM_DOES_NOT_EXIST"})
    assert str(exc.value) == "Invalid stream"
    assert exc.value.code == "STREAM_DOES_NOT_EXIST"
    assert exc.value.http_status == 400
    assert exc.value.data["msg"] == "Invalid stream"


def test_client_error_code_defaults_to_bad_request() -> None:
    body = {"result": "error", "msg": "nope"}
    with pytest.raises(ApiError) as exc:
        interpret_api_response(403, body)
    assert exc.value.code == "BAD_REQUEST"
    assert exc.value.data == {"result": "error", "msg": "nope"}


@pytest.mark.parametrize(
    "data",
    [None, "oops", {"result": "error"}, {"result": "error", "msg": 5}, {"result": "error", "msg": "x", "code": 1}],
)
def test_client_error_without_api_shape_is_malformed(data) -> None:
    with pytest.raises(MalformedResponseError) as exc:
        interpret_api_response(404, data)
    assert exc.value.data == data


def test_server_error() -> None:
    with pytest.raises(Server5xxError) as exc:
        interpret_api_response(502, {"result": "error", "msg": "bad gateway"})
    assert exc.value.http_status == 502
    assert isinstance(exc.value, RequestError)


@pytest.mark.parametrize("status", [101, 302, 600])
def test_unexpected_status(status: int) -> None:
    with pytest.raises(UnexpectedHttpStatusError) as exc:
        interpret_api_response(status, {"x": 1})
    assert exc.value.http_status == status
    assert exc.value.data == {"x": 1}
