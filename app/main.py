"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import APPLICATION_HOST, AppSettings, config_load_settings


def main_load_settings(argv: list[str] | None = None) -> AppSettings:
    """Parse command-line arguments and load settings with the port override applied.

    Args:
        argv: Optional argument list; `sys.argv` is used when omitted.

    Returns:
        AppSettings: Validated runtime settings.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Spring Boot ECS Fargate Example runtime entrypoint")
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional listening port override for APPLICATION_PORT",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.port is None:
        return config_load_settings()
    return config_load_settings(application_port=parsed_arguments.port)


def main() -> None:
    """Run the HTTP server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = main_load_settings()
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=APPLICATION_HOST,
        port=settings.application_port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
