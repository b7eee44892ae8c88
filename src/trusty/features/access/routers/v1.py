"""
API endpoints for access decisions.
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_decision_engine
from ..entities import IsAllowedRequest, IsAllowedResult
from ..services import AccessDecisionEngine

router = APIRouter()


@router.post(
    "/isallowed",
    response_model=IsAllowedResult,
    summary="Check access",
    description="Decide whether the actor may perform the action on the resource in the namespace"
)
async def is_allowed(
    request: IsAllowedRequest,
    engine: AccessDecisionEngine = Depends(get_decision_engine)
) -> IsAllowedResult:
    """
    Evaluate a decision request.

    Invalid requests and directory outages are raised to the application's
    exception handlers, so a denial is only ever reported as result=false.
    """
    return await engine.is_allowed(request, request.namespace)
