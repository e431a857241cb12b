import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from requests.auth import HTTPBasicAuth

from mailchimp_sdk.config import DEFAULT_HEADERS
from mailchimp_sdk.http.errors import EncodingError


@dataclass(frozen=True)
class RequestData:
    """Data class for request data.

    Attributes:
        method: The HTTP method of the request.
        url: The URL of the request.
        headers: The headers of the request.
        auth: The Basic auth credentials of the request.
        data: The JSON encoded body of the request.
    """

    method: str
    url: str
    headers: Dict[str, str]
    auth: HTTPBasicAuth
    data: Optional[bytes]


def prepare_request_data(
    method: str,
    base_url: str,
    path: str,
    api_key: str,
    body: Any = None,
) -> RequestData:
    """Prepare request data.

    The path is appended to the base URL verbatim and the API key is sent as
    the Basic auth password with an empty username.

    Args:
        method: The HTTP method of the request.
        base_url: The API endpoint.
        path: The path of the resource.
        api_key: The API key.
        body: The payload of the request, ``None`` to send no body.

    Returns:
        The request data.

    Raises:
        EncodingError: If the body cannot be serialised to JSON.
    """
    data = encode_body(body=body)
    headers = dict(DEFAULT_HEADERS) if data is not None else {}
    return RequestData(
        method=method,
        url=f"{base_url}{path}",
        headers=headers,
        auth=HTTPBasicAuth(username="", password=api_key),
        data=data,
    )


def encode_body(body: Any) -> Optional[bytes]:
    if body is None:
        return None
    try:
        return json.dumps(body, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as error:
        raise EncodingError(f"Could not serialise request body to JSON: {error}") from error
