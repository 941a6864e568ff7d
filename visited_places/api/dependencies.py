"""Shared dependencies for API endpoints."""
from typing import Optional
from fastapi import Header, HTTPException


async def get_optional_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> Optional[str]:
    """User id forwarded by the identity provider, or None when signed out."""
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()


async def get_current_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> str:
    """Signed-in user id.

    Raises:
        HTTPException: 401 if no user is signed in
    """
    user_id = await get_optional_user_id(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=401,
            detail="User is not signed in"
        )
    return user_id
