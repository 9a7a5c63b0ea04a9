from typing import Iterator, Optional

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ..core.config import settings
from ..services.like_ledger import LikeLedger
from ..services.top_artists import TopArtistsQuery
from ..services.viewer_identity import ViewerIdentity
from ..store import DocumentStore, get_store

bearer_scheme = HTTPBearer(auto_error=False)


class CookieStorage:
    """Viewer storage backed by the request's cookies.

    Reads come from the incoming request; writes become ``Set-Cookie`` on the
    outgoing response.
    """

    def __init__(self, request: Request, response: Response) -> None:
        self.request = request
        self.response = response

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.request.cookies.get(key, default)

    def __setitem__(self, key: str, value: str) -> None:
        self.response.set_cookie(
            key,
            value,
            max_age=settings.VIEWER_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
            secure=settings.VIEWER_COOKIE_SECURE,
        )


def get_viewer_identity() -> ViewerIdentity:
    return ViewerIdentity()


def get_viewer_id(
    request: Request,
    response: Response,
    identity: ViewerIdentity = Depends(get_viewer_identity),
) -> str:
    return identity.get_or_create_viewer_id(CookieStorage(request, response))


def get_like_ledger(store: DocumentStore = Depends(get_store)) -> LikeLedger:
    return LikeLedger(store)


def get_top_artists_query(
    store: DocumentStore = Depends(get_store),
    ledger: LikeLedger = Depends(get_like_ledger),
) -> TopArtistsQuery:
    return TopArtistsQuery(store, ledger)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    request: Request = None,
) -> str:
    """Return the opaque authenticated user id (the token's ``sub`` claim)."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = credentials.credentials if credentials else None
    if not token and request is not None:
        token = request.cookies.get("access_token")
    if not token:
        raise credentials_exception
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception
    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception
    return str(user_id)
