"""
Dependency injection for access feature.
"""

from fastapi import Request

from ...core.exceptions import ConfigurationError
from .services import AccessDecisionEngine


def get_decision_engine(request: Request) -> AccessDecisionEngine:
    """
    Return the decision engine constructed at application startup.

    Returns:
        AccessDecisionEngine: Engine held on the application state
    """
    engine = getattr(request.app.state, "decision_engine", None)
    if engine is None:
        raise ConfigurationError("Access decision engine is not initialized")
    return engine
