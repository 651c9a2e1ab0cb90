"""Typed response records returned by the informational endpoints.

Records are constructed fresh for every request and discarded after
serialization.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HelloResponse:
    """Greeting payload for the hello endpoint.

    Attributes:
        message: Fixed greeting text.
        timestamp: Local wall-clock time at construction in ISO-8601 text.
        status: Fixed service status marker.
    """

    message: str
    timestamp: str
    status: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON object sent over the wire.

        Returns:
            dict[str, str]: Response body with `message`, `timestamp`, `status`.
        """

        return {
            "message": self.message,
            "timestamp": self.timestamp,
            "status": self.status,
        }


@dataclass(frozen=True)
class InfoResponse:
    """Application and runtime identification payload for the info endpoint.

    Attributes:
        application: Fixed application name.
        version: Fixed application version.
        python_version: Interpreter version of the serving process.
        os: Operating-system name of the serving host.
    """

    application: str
    version: str
    python_version: str
    os: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON object sent over the wire.

        Returns:
            dict[str, str]: Response body using the hyphenated `python-version` key.
        """

        return {
            "application": self.application,
            "version": self.version,
            "python-version": self.python_version,
            "os": self.os,
        }
