from mailchimp_sdk.http.client import MailchimpHTTPClient
from mailchimp_sdk.http.entities import (
    Batch,
    BatchOperation,
    BatchResponse,
    ClientConfiguration,
    create_batch,
)
from mailchimp_sdk.http.errors import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    MailchimpClientError,
    RemoteError,
    TransportError,
)
from mailchimp_sdk.http.utils.requests import check_response
from mailchimp_sdk.utils.logging import enable_debug_logging

from mailchimp_sdk.version import __version__
