from typing import Optional


class MailchimpClientError(Exception):
    """Base class for Mailchimp client errors."""

    pass


class ConfigurationError(MailchimpClientError):
    """Error for malformed client configuration, such as an invalid API key."""

    pass


class EncodingError(MailchimpClientError):
    """Error for request bodies that could not be serialised to JSON."""

    pass


class TransportError(MailchimpClientError):
    """Error for network level failures (DNS, connection, timeout, TLS)."""

    pass


class DecodingError(MailchimpClientError):
    """Error for successful responses whose body is not the expected JSON.

    Attributes:
        status_code: The status code of the response which failed to decode.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.__status_code = status_code

    @property
    def status_code(self) -> Optional[int]:
        """The status code of the response which failed to decode."""
        return self.__status_code


class RemoteError(MailchimpClientError):
    """Error reported by the API itself through a non-2xx response.

    Fields mirror the API error document. When the response body is empty or
    not a JSON object they keep their zero values, while ``http_status_code``
    always holds the status code observed on the response.

    Attributes:
        type: The error type URI reported by the API.
        title: The short, human readable error title.
        status: The status code reported inside the error document.
        detail: The detailed error message.
        http_status_code: The status code of the HTTP response.
        payload: The decoded error document, if the body was a JSON object.
    """

    def __init__(
        self,
        type: str = "",
        title: str = "",
        status: int = 0,
        detail: str = "",
        http_status_code: Optional[int] = None,
        payload: Optional[dict] = None,
    ):
        self.__type = type
        self.__title = title
        self.__status = status
        self.__detail = detail
        self.__http_status_code = http_status_code
        self.__payload = payload
        super().__init__(self.__str__())

    @property
    def type(self) -> str:
        """The error type URI reported by the API."""
        return self.__type

    @property
    def title(self) -> str:
        """The short, human readable error title."""
        return self.__title

    @property
    def status(self) -> int:
        """The status code reported inside the error document."""
        return self.__status

    @property
    def detail(self) -> str:
        """The detailed error message."""
        return self.__detail

    @property
    def http_status_code(self) -> Optional[int]:
        """The status code of the HTTP response."""
        return self.__http_status_code

    @property
    def payload(self) -> Optional[dict]:
        """The decoded error document, if any."""
        return self.__payload

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"type='{self.type}', "
            f"title='{self.title}', "
            f"status={self.status}, "
            f"detail='{self.detail}', "
            f"http_status_code={self.http_status_code})"
        )

    def __str__(self) -> str:
        return f"Error {self.status} {self.title} ({self.detail})"
