import json

import requests
from requests import Response, Session

from mailchimp_sdk.http.entities import JSONValue
from mailchimp_sdk.http.errors import DecodingError, TransportError
from mailchimp_sdk.http.utils.request_building import RequestData
from mailchimp_sdk.http.utils.requests import (
    deduct_api_key_from_string,
    extract_error,
    is_successful_status,
)
from mailchimp_sdk.utils.logging import get_logger

logger = get_logger("http.utils.executors")

# Shared by every client constructed without an explicit session.
DEFAULT_SESSION = requests.Session()


def execute_request(session: Session, request_data: RequestData) -> JSONValue:
    """Execute the request and interpret its response.

    The response body is read in full and the response is closed on every
    path, including failures to decode it.

    Args:
        session: The transport to send the request with.
        request_data: The request to execute.

    Returns:
        The decoded JSON body of a 2xx response.

    Raises:
        TransportError: If the request could not be sent or the response read.
        DecodingError: If a 2xx response body is not valid JSON.
        RemoteError: If the response status is outside of 2xx.
    """
    response = send_request(session=session, request_data=request_data)
    try:
        status_code = response.status_code
        content = read_content(response=response, request_data=request_data)
    finally:
        response.close()
    logger.debug(
        "%s %s returned %s", request_data.method, request_data.url, status_code
    )
    if not is_successful_status(status_code):
        raise extract_error(status_code=status_code, content=content)
    return decode_json(content=content, status_code=status_code)


def send_request(session: Session, request_data: RequestData) -> Response:
    logger.debug("Sending %s %s", request_data.method, request_data.url)
    try:
        return session.request(
            request_data.method,
            request_data.url,
            headers=request_data.headers,
            auth=request_data.auth,
            data=request_data.data,
        )
    except requests.exceptions.RequestException as error:
        raise TransportError(
            "Error with server connection: "
            f"{deduct_api_key_from_string(str(error), api_key=request_data.auth.password)}"
        ) from error


def read_content(response: Response, request_data: RequestData) -> bytes:
    try:
        return response.content
    except requests.exceptions.RequestException as error:
        raise TransportError(
            "Error while reading response body: "
            f"{deduct_api_key_from_string(str(error), api_key=request_data.auth.password)}"
        ) from error


def decode_json(content: bytes, status_code: int) -> JSONValue:
    try:
        return json.loads(content)
    except (ValueError, RecursionError) as error:
        raise DecodingError(
            f"Could not decode API response with status {status_code} as JSON.",
            status_code=status_code,
        ) from error
