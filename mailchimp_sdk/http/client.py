from typing import Any, Optional

from pydantic import ValidationError
from requests import Session

from mailchimp_sdk.config import API_URL_TEMPLATE, BATCHES_PATH, SUBSCRIBED_STATUS
from mailchimp_sdk.http.entities import (
    Batch,
    BatchResponse,
    ClientConfiguration,
    JSONValue,
)
from mailchimp_sdk.http.errors import DecodingError, EncodingError
from mailchimp_sdk.http.utils.executors import DEFAULT_SESSION, execute_request
from mailchimp_sdk.http.utils.request_building import prepare_request_data
from mailchimp_sdk.http.utils.requests import mask_api_key, parse_api_key


class MailchimpHTTPClient:
    """Client of the Mailchimp Marketing API.

    The configuration is fixed at construction, so a single instance can be
    shared between threads. The session is used by reference and never
    closed by the client.
    """

    @classmethod
    def init(
        cls,
        api_key: str,
        session: Optional[Session] = None,
    ) -> "MailchimpHTTPClient":
        return cls(api_key=api_key, session=session)

    def __init__(
        self,
        api_key: str,
        session: Optional[Session] = None,
    ):
        _, data_center = parse_api_key(api_key=api_key)
        self.__configuration = ClientConfiguration(
            api_key=api_key,
            data_center=data_center,
            base_url=API_URL_TEMPLATE.format(data_center=data_center),
        )
        if session is None:
            session = DEFAULT_SESSION
        self.__session = session

    @property
    def configuration(self) -> ClientConfiguration:
        return self.__configuration

    @property
    def api_key(self) -> str:
        return self.__configuration.api_key

    @property
    def data_center(self) -> str:
        return self.__configuration.data_center

    @property
    def base_url(self) -> str:
        return self.__configuration.base_url

    @property
    def session(self) -> Session:
        return self.__session

    def do(self, method: str, path: str, body: Any = None) -> JSONValue:
        """Execute a single API call.

        Args:
            method: The HTTP method.
            path: The path of the resource, appended to the base URL verbatim.
            body: The JSON serialisable payload, ``None`` to send no body.

        Returns:
            The decoded JSON body of the response.

        Raises:
            EncodingError: If the body cannot be serialised. No request is sent.
            TransportError: If the request fails at the network level.
            DecodingError: If a successful response body is not valid JSON.
            RemoteError: If the API responds with a non-2xx status.
        """
        request_data = prepare_request_data(
            method=method,
            base_url=self.__configuration.base_url,
            path=path,
            api_key=self.__configuration.api_key,
            body=body,
        )
        return execute_request(session=self.__session, request_data=request_data)

    def submit_batch(self, batch: Batch) -> BatchResponse:
        """Submit all operations of the batch as a single request.

        The operation array is JSON encoded and embedded as a string under the
        ``operations`` key of the request body.

        Args:
            batch: The batch to submit.

        Returns:
            The acknowledgement of the accepted batch.
        """
        try:
            operations = batch.encode_operations()
        except (TypeError, ValueError) as error:
            raise EncodingError(
                f"Could not serialise batch operations to JSON: {error}"
            ) from error
        response = self.do(
            method="POST",
            path=BATCHES_PATH,
            body={"operations": operations},
        )
        if not isinstance(response, dict):
            raise DecodingError("Batch submission response is not a JSON object.")
        try:
            return BatchResponse.model_validate(response)
        except ValidationError as error:
            raise DecodingError(
                f"Could not decode batch submission response: {error}"
            ) from error

    def subscribe(self, email: str, list_id: str) -> JSONValue:
        return self.do(
            method="POST",
            path=f"/lists/{list_id}/members/",
            body={"email_address": email, "status": SUBSCRIBED_STATUS},
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"api_key='{mask_api_key(api_key=self.api_key)}', "
            f"base_url='{self.base_url}')"
        )
