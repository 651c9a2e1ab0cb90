"""FastAPI application factory for the demo service.

This module defines API application composition and the routing-miss policy:
every request outside the registered GET routes is answered with 404.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import AppSettings

from .routers import api_create_demo_router


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Generated documentation routes and trailing-slash redirects are disabled so
    that only the explicitly registered routes answer. Debug tracebacks are
    enabled when the configured log level is `debug` or `trace`.

    Args:
        settings: Validated application settings used for debug mode selection.

    Returns:
        FastAPI: Framework application instance with registered routes.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(
        title="Spring Boot ECS Fargate Example",
        debug=settings.log_level in ("debug", "trace"),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    @application.exception_handler(StarletteHTTPException)
    async def api_handle_http_exception(request: Request, error: StarletteHTTPException) -> Response:
        """Map method mismatches on known paths to the routing-miss response.

        Args:
            request: Incoming request.
            error: Framework HTTP exception raised during routing or handling.

        Returns:
            Response: 404 for method mismatches, framework default otherwise.
        """

        if error.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return JSONResponse(content={"detail": "Not Found"}, status_code=status.HTTP_404_NOT_FOUND)
        return await http_exception_handler(request, error)

    application.include_router(api_create_demo_router())

    return application
