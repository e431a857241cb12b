"""Loggers of the Mailchimp SDK.

The SDK only emits DEBUG records describing outgoing requests and never logs
errors, which are always raised to the caller. Nothing is printed unless the
application configures the ``mailchimp_sdk`` logger, either through its own
logging setup or with :func:`enable_debug_logging`.
"""

import logging
from typing import Optional

SDK_LOGGER_NAME = "mailchimp_sdk"

logging.getLogger(SDK_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(module_name: str) -> logging.Logger:
    """Get the logger of an SDK module.

    Args:
        module_name: Dotted name of the module inside the SDK, e.g. ``http.client``.

    Returns:
        logging.Logger: Child of the ``mailchimp_sdk`` logger.
    """
    return logging.getLogger(f"{SDK_LOGGER_NAME}.{module_name}")


def enable_debug_logging(handler: Optional[logging.Handler] = None) -> logging.Handler:
    """Route SDK request traces to a handler, for troubleshooting.

    Records still propagate to the application's loggers.

    Args:
        handler: Handler to attach, a stderr ``StreamHandler`` by default.

    Returns:
        logging.Handler: The attached handler, to be removed by the caller when done.
    """
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(logging.DEBUG)
    return handler
