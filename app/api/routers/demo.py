"""Informational endpoint router composition for hello and info payloads."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.domain import domain_build_hello_response, domain_build_info_response


def api_create_demo_router() -> APIRouter:
    """Create router exposing the static informational endpoints.

    Returns:
        APIRouter: Router exposing `/api/hello` and `/api/info`.

    Raises:
        RuntimeError: Raised if router initialization fails.
    """

    router = APIRouter(prefix="/api", tags=["demo"])

    @router.get("/hello")
    def api_hello() -> JSONResponse:
        """Return the greeting payload with the current timestamp.

        Returns:
            JSONResponse: Greeting payload with HTTP 200.
        """

        payload = domain_build_hello_response().to_payload()
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/info")
    def api_info() -> JSONResponse:
        """Return application metadata and serving runtime details.

        Returns:
            JSONResponse: Identification payload with HTTP 200.
        """

        payload = domain_build_info_response().to_payload()
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
