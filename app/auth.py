import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import config

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Verify the caller is staff with admin rights.
    Identity provider integration lives outside this service; staff tools
    authenticate with the shared admin API token.
    """
    if not credentials:
        logger.error("❌ No credentials provided")
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
        )

    if not config.ADMIN_API_TOKEN:
        logger.error("❌ ADMIN_API_TOKEN not configured")
        raise HTTPException(status_code=500, detail="Admin access not configured")

    if not secrets.compare_digest(credentials.credentials.encode(), config.ADMIN_API_TOKEN.encode()):
        logger.warning("⚠️ Admin authentication failed: invalid token")
        raise HTTPException(status_code=401, detail="Invalid admin token")

    return "admin"
