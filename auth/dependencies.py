"""
FastAPI dependencies for authentication.

``get_current_user`` is the only authorization primitive: it turns the
``Authorization: Bearer <token>`` header into the acting ``Identity`` or
rejects the request before the route handler runs.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.jwt import Identity, TokenService
from utils.errors import Unauthenticated

_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Extract and verify the Bearer token, returning the authenticated
    identity.  Missing token → 401, invalid or expired token → 403.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return tokens.verify(credentials.credentials)
