"""Builders for the informational endpoint payloads."""

from __future__ import annotations

import os
import platform
from datetime import datetime
from typing import Final

from .models import HelloResponse, InfoResponse

HELLO_MESSAGE: Final[str] = "Hello from Spring Boot on AWS ECS Fargate!"
HELLO_STATUS: Final[str] = "running"
APPLICATION_NAME: Final[str] = "Spring Boot ECS Fargate Example"
APPLICATION_VERSION: Final[str] = "1.0.0"


def domain_build_hello_response() -> HelloResponse:
    """Build one greeting record stamped with the current local time.

    Returns:
        HelloResponse: Greeting record with a fresh timestamp.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return HelloResponse(
        message=HELLO_MESSAGE,
        timestamp=datetime.now().isoformat(),
        status=HELLO_STATUS,
    )


def domain_build_info_response() -> InfoResponse:
    """Build one identification record from fixed metadata and host introspection.

    Returns:
        InfoResponse: Identification record for the serving process.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return InfoResponse(
        application=APPLICATION_NAME,
        version=APPLICATION_VERSION,
        python_version=platform.python_version(),
        os=domain_resolve_os_name(),
    )


def domain_resolve_os_name() -> str:
    """Return the host operating-system name.

    `platform.system()` may report an empty string when undeterminable; the
    interpreter's `os.name` is used then.

    Returns:
        str: Non-empty operating-system name.
    """

    return platform.system() or os.name
