import json
import logging
from typing import Any, NamedTuple

from fastapi import HTTPException, Request, status
from jwcrypto import jwk, jwt  # type: ignore

logger = logging.getLogger(__name__)


class AuthSession(NamedTuple):
    clerk_id: str
    claims: dict[str, Any]


def session_user_id(session: AuthSession) -> int | None:
    """
    Our user id, from the "userId" claim.
    Clerk only has it once the user.created webhook has written it back to
    the user's public metadata, so brand new sessions won't have it yet.
    """
    user_id = session.claims.get("userId")
    if user_id is None:
        return None
    if isinstance(user_id, int) and not isinstance(user_id, bool):
        return user_id
    if isinstance(user_id, str) and user_id.isascii() and user_id.isdigit():
        return int(user_id)
    logger.warning("Bad userId claim for %s: %r", session.clerk_id, user_id)
    return None


def _redirect_home() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        headers={"Location": "/"},
    )


class Auth:
    """
    Dependency that validates the Clerk session cookie.
    Anything other than a valid session gets redirected home.
    """

    def __init__(self, clerk_jwt_public_key: str):
        pem = bytes(clerk_jwt_public_key, "utf-8")
        self.key = jwk.JWK.from_pem(data=pem)

    async def __call__(self, request: Request) -> AuthSession:
        session = request.cookies.get("__session")
        if not session:
            raise _redirect_home()
        try:
            token = jwt.JWT(key=self.key, jwt=session, expected_type="JWS")
            claims = json.loads(token.claims)
            clerk_id = claims["sub"]
            assert isinstance(clerk_id, str)
        except Exception as e:
            raise _redirect_home() from e
        return AuthSession(clerk_id=clerk_id, claims=claims)
