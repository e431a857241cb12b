import pytest
from requests import Response

from mailchimp_sdk.http.errors import ConfigurationError, RemoteError
from mailchimp_sdk.http.utils.requests import (
    check_response,
    deduct_api_key_from_string,
    extract_error,
    is_successful_status,
    mask_api_key,
    parse_api_key,
)


@pytest.mark.parametrize(
    "api_key, expected_result",
    [
        ("xyz-us11", ("xyz", "us11")),
        ("0123456789abcdef-us1", ("0123456789abcdef", "us1")),
        ("a-b", ("a", "b")),
    ],
)
def test_parse_api_key_when_key_is_well_formed(
    api_key: str, expected_result: tuple
) -> None:
    # when
    result = parse_api_key(api_key=api_key)

    # then
    assert result == expected_result


@pytest.mark.parametrize(
    "api_key",
    ["", "xyz", "xyz-", "-us11", "-", "xyz-us11-extra", "a--b", "a-b-c-d"],
)
def test_parse_api_key_when_key_is_malformed(api_key: str) -> None:
    # when
    with pytest.raises(ConfigurationError) as error:
        _ = parse_api_key(api_key=api_key)

    # then
    assert "xyz-us11" in str(error.value)


def test_parse_api_key_when_key_is_not_a_string() -> None:
    # when
    with pytest.raises(ConfigurationError):
        _ = parse_api_key(api_key=None)  # type: ignore[arg-type]


def test_mask_api_key_when_key_is_long() -> None:
    # when
    result = mask_api_key(api_key="0123456789abcdef-us11")

    # then
    assert result == "01***ef-us11"


def test_mask_api_key_when_key_is_short() -> None:
    # when
    result = mask_api_key(api_key="xyz-us11")

    # then
    assert result == "***-us11"


def test_deduct_api_key_from_string_when_key_present() -> None:
    # when
    result = deduct_api_key_from_string(
        value="failed for 0123456789abcdef-us11 at host",
        api_key="0123456789abcdef-us11",
    )

    # then
    assert result == "failed for 01***ef-us11 at host"


def test_deduct_api_key_from_string_when_key_absent() -> None:
    # when
    result = deduct_api_key_from_string(value="nothing here", api_key="abc-us1")

    # then
    assert result == "nothing here"


@pytest.mark.parametrize(
    "status_code, expected_result",
    [(199, False), (200, True), (204, True), (299, True), (300, False), (404, False)],
)
def test_is_successful_status(status_code: int, expected_result: bool) -> None:
    # when
    result = is_successful_status(status_code=status_code)

    # then
    assert result is expected_result


def test_extract_error_when_body_is_well_formed() -> None:
    # given
    content = b'{"type":"t","title":"T","status":404,"detail":"d","instance":"i"}'

    # when
    result = extract_error(status_code=404, content=content)

    # then
    assert str(result) == "Error 404 T (d)"
    assert result.type == "t"
    assert result.http_status_code == 404
    assert result.payload["instance"] == "i"


@pytest.mark.parametrize(
    "content",
    [None, b"", b"not json", b"[1, 2]", b'"text"', b"null", b"\xff\xfe\x00"],
)
def test_extract_error_when_body_is_not_error_document(content) -> None:
    # when
    result = extract_error(status_code=502, content=content)

    # then
    assert isinstance(result, RemoteError)
    assert result.type == ""
    assert result.title == ""
    assert result.status == 0
    assert result.detail == ""
    assert result.http_status_code == 502


def test_extract_error_when_fields_have_unexpected_types() -> None:
    # given
    content = b'{"type": 1, "title": "T", "status": "404", "detail": null}'

    # when
    result = extract_error(status_code=400, content=content)

    # then
    assert result.type == ""
    assert result.title == "T"
    assert result.status == 0
    assert result.detail == ""


def test_check_response_when_response_is_successful() -> None:
    # given
    response = Response()
    response.status_code = 201
    response._content = b"{}"

    # when
    result = check_response(response=response)

    # then
    assert result is None


def test_check_response_when_response_is_not_successful() -> None:
    # given
    response = Response()
    response.status_code = 400
    response._content = b'{"title": "Invalid Resource", "status": 400, "detail": "x"}'

    # when
    result = check_response(response=response)

    # then
    assert str(result) == "Error 400 Invalid Resource (x)"


@pytest.mark.parametrize("api_key", ["ключ-us1", "key-us1☃", "€€-us11"])
def test_parse_api_key_when_key_cannot_be_sent_with_basic_auth(api_key: str) -> None:
    # when
    with pytest.raises(ConfigurationError) as error:
        _ = parse_api_key(api_key=api_key)

    # then
    assert isinstance(error.value.__cause__, UnicodeEncodeError)


def test_parse_api_key_when_key_holds_latin_1_characters() -> None:
    # when
    result = parse_api_key(api_key="clé-us1")

    # then
    assert result == ("clé", "us1")


def test_extract_error_when_body_is_nested_too_deeply() -> None:
    # when
    result = extract_error(status_code=500, content=b"[" * 200000)

    # then
    assert result.status == 0
    assert result.title == ""
    assert result.http_status_code == 500
    assert result.payload is None
