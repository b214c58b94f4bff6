"""
Preferred authentication configuration
"""
from typing import List, Mapping, Optional

from .constants import (
    AUTH_GSSAPI_WITH_MIC,
    BASE_AUTH_METHODS,
    ENV_PARAM_USERAUTH_GSSAPI,
    GSSAPI_ENABLED_VALUE,
    PREFERRED_AUTHENTICATIONS,
)
from .interfaces import Session
from .logging import get_logger

logger = get_logger(__name__)


def resolve_gssapi_flag(settings: Optional[Mapping[str, str]]) -> bool:
    """
    Resolve the GSSAPI toggle from a settings mapping.
    
    Only the exact string "true" enables it; "yes", "True", empty
    or missing values all leave it disabled.
    
    Args:
        settings: Settings mapping (may be None)
    
    Returns:
        True if GSSAPI authentication should be offered
    """
    if not settings:
        return False
    return settings.get(ENV_PARAM_USERAUTH_GSSAPI) == GSSAPI_ENABLED_VALUE


def build_preferred_authentications(gssapi_enabled: bool) -> List[str]:
    """Ordered auth methods; gssapi-with-mic is always last when enabled"""
    methods = list(BASE_AUTH_METHODS)
    if gssapi_enabled:
        methods.append(AUTH_GSSAPI_WITH_MIC)
    return methods


def configure(session: Session, gssapi_enabled: bool) -> None:
    """
    Apply the preferred authentication list to a session before connecting.
    
    Args:
        session: Unconnected session
        gssapi_enabled: Whether to offer gssapi-with-mic
    """
    preferred = ",".join(build_preferred_authentications(gssapi_enabled))
    logger.debug("%s=%s", PREFERRED_AUTHENTICATIONS, preferred)
    session.set_config(PREFERRED_AUTHENTICATIONS, preferred)
