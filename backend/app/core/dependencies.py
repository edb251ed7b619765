import logging
import secrets

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from app.core.exceptions import UnauthorizedError
from app.services.data_manager import DataManager

logger = logging.getLogger(__name__)

# auto_error=False: the admin cookie is an accepted alternative to the header
bearer_scheme = HTTPBearer(auto_error=False)

ADMIN_COOKIE = "admin-auth"


def get_data_manager(request: Request) -> DataManager:
    return request.app.state.data_manager


async def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    if not settings.admin_enabled:
        logger.warning("Admin request rejected: ADMIN_TOKEN is not configured")
        raise UnauthorizedError("Admin access is not configured")

    token = credentials.credentials if credentials else request.cookies.get(ADMIN_COOKIE)
    if not token or not secrets.compare_digest(token.encode(), settings.ADMIN_TOKEN.encode()):
        raise UnauthorizedError("Admin access required")
