"""Bearer-token extraction: the token is the caller's Yahoo application id."""

import logging

from .constants import ErrorMessages
from .errors import AuthenticationError, MessageId

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_app_id(auth_header: str | None, id: MessageId = None) -> str:
    """Return the Yahoo app id carried in an ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: If the header is absent, not Bearer, or empty
    """
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        logger.warning("Rejected request without a Bearer Authorization header")
        raise AuthenticationError(ErrorMessages.AUTH_REQUIRED, id=id)
    app_id = auth_header[len(BEARER_PREFIX) :].strip()
    if not app_id:
        logger.warning("Rejected request with an empty Bearer token")
        raise AuthenticationError(ErrorMessages.AUTH_EMPTY, id=id)
    return app_id
