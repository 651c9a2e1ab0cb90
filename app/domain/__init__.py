"""Domain models used across application layer boundaries."""

from .models import HelloResponse, InfoResponse
from .responses import (
    APPLICATION_NAME,
    APPLICATION_VERSION,
    HELLO_MESSAGE,
    HELLO_STATUS,
    domain_build_hello_response,
    domain_build_info_response,
)

__all__ = [
    "APPLICATION_NAME",
    "APPLICATION_VERSION",
    "HELLO_MESSAGE",
    "HELLO_STATUS",
    "HelloResponse",
    "InfoResponse",
    "domain_build_hello_response",
    "domain_build_info_response",
]
