import json
from typing import Optional, Tuple

from requests import Response

from mailchimp_sdk.config import API_KEY_FORMAT_EXAMPLE, API_KEY_SEPARATOR
from mailchimp_sdk.http.errors import ConfigurationError, RemoteError

MIN_KEY_LENGTH_TO_REVEAL_PREFIX = 8
ERROR_FIELDS_TYPES = {
    "type": str,
    "title": str,
    "status": int,
    "detail": str,
}


def parse_api_key(api_key: str) -> Tuple[str, str]:
    """Split the API key into its key and data center parts.

    Args:
        api_key: The API key, formatted like ``xyz-us11``.

    Returns:
        The key part and the data center token.

    Raises:
        ConfigurationError: If the API key is not made of exactly two
            non-empty parts separated by a single ``-``,
            or cannot be sent as a Basic auth password.
    """
    if not isinstance(api_key, str):
        raise ConfigurationError(
            f"Mailchimp API key must be a string formatted like: {API_KEY_FORMAT_EXAMPLE}"
        )
    chunks = api_key.split(API_KEY_SEPARATOR)
    if len(chunks) != 2 or not all(chunks):
        raise ConfigurationError(
            f"Mailchimp API key must be formatted like: {API_KEY_FORMAT_EXAMPLE}"
        )
    try:
        api_key.encode("latin-1")
    except UnicodeEncodeError as error:
        raise ConfigurationError(
            "Mailchimp API key must contain only latin-1 characters, "
            f"formatted like: {API_KEY_FORMAT_EXAMPLE}"
        ) from error
    key, data_center = chunks
    return key, data_center


def mask_api_key(api_key: str) -> str:
    """Mask the secret part of the API key, keeping the data center visible.

    Args:
        api_key: The API key to mask.

    Returns:
        The masked API key.
    """
    key, separator, data_center = api_key.rpartition(API_KEY_SEPARATOR)
    if not separator:
        key, data_center = api_key, ""
    if len(key) < MIN_KEY_LENGTH_TO_REVEAL_PREFIX:
        masked_key = "***"
    else:
        masked_key = f"{key[:2]}***{key[-2:]}"
    return f"{masked_key}{separator}{data_center}"


def deduct_api_key_from_string(value: str, api_key: Optional[str]) -> str:
    """Replace every occurrence of the API key in the string with its masked form.

    Args:
        value: The string to deduct the API key from.
        api_key: The API key to look for.

    Returns:
        The string with the API key deducted.
    """
    if not api_key:
        return value
    return value.replace(api_key, mask_api_key(api_key=api_key))


def is_successful_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def extract_error(status_code: int, content: Optional[bytes]) -> RemoteError:
    """Build the error reported by the API from a non-2xx response body.

    Never raises: an empty, malformed or non-object body yields an error with
    zero-valued fields, and fields of unexpected type keep their defaults.

    Args:
        status_code: The status code of the response.
        content: The raw response body.

    Returns:
        The error reported by the API.
    """
    payload = _decode_error_payload(content=content)
    if payload is None:
        return RemoteError(http_status_code=status_code)
    fields = {}
    for name, expected_type in ERROR_FIELDS_TYPES.items():
        value = payload.get(name)
        if isinstance(value, bool) or not isinstance(value, expected_type):
            continue
        fields[name] = value
    return RemoteError(http_status_code=status_code, payload=payload, **fields)


def _decode_error_payload(content: Optional[bytes]) -> Optional[dict]:
    if not content:
        return None
    try:
        payload = json.loads(content)
    except (ValueError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def check_response(response: Response) -> Optional[RemoteError]:
    """Check the status of the response.

    Args:
        response: The response to check. Its body is read in full.

    Returns:
        None for 2xx responses, otherwise the error reported by the API.
    """
    if is_successful_status(response.status_code):
        return None
    return extract_error(status_code=response.status_code, content=response.content)
