"""
System endpoints.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/healthz", summary="Liveness probe")
async def healthz() -> dict:
    """Report that the service process is up."""
    return {"status": "ok"}


@router.get("/readyz", summary="Readiness probe")
async def readyz(request: Request) -> JSONResponse:
    """Report whether the directory store can serve decisions.

    Stores without a health_check have no remote dependency and are always ready.
    """
    store = getattr(request.app.state, "directory_store", None)
    health_check = getattr(store, "health_check", None)

    if store is None:
        ready = False
    elif health_check is None:
        ready = True
    else:
        ready = await health_check()

    if ready:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ready"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "checks": {"directory_store": "unhealthy"}},
    )
