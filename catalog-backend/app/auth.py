"""Admin gate for the editing routes."""
import os
import secrets
from typing import Optional

from fastapi import Header, HTTPException


async def verify_admin_key(x_admin_key: Optional[str] = Header(None, alias="X-Admin-Key")) -> bool:
    """Check the X-Admin-Key header against ADMIN_API_KEY.

    Raises:
        HTTPException: 500 if no key is configured, 401 if the header is
            missing, 403 if it does not match
    """
    expected_key = os.getenv("ADMIN_API_KEY")

    if not expected_key:
        raise HTTPException(status_code=500, detail="Admin key not configured on server")

    if not x_admin_key:
        raise HTTPException(status_code=401, detail="Unauthorized")

    if not secrets.compare_digest(x_admin_key, expected_key):
        raise HTTPException(status_code=403, detail="Invalid admin key")

    return True
