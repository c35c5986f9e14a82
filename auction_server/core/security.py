# auction_server/core/security.py
import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

logger = logging.getLogger(__name__)

ADMIN_REALM = "Admin area"

# auto_error is off so a missing header and wrong credentials produce the
# same challenge; a header that is not valid base64 is rejected by HTTPBasic.
basic_auth = HTTPBasic(realm=ADMIN_REALM, auto_error=False)


def _challenge(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": f'Basic realm="{ADMIN_REALM}"'},
    )


def credentials_match(
    credentials: HTTPBasicCredentials, username: str, password: str
) -> bool:
    # Compare both parts every time so the timing does not reveal which failed.
    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), username.encode("utf-8")
    )
    pass_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), password.encode("utf-8")
    )
    return user_ok and pass_ok


async def verify_admin(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
) -> str:
    """
    Checks the Basic-Auth credentials of an admin request.

    Every request is authenticated on its own; nothing is remembered between
    requests. Returns the admin username on success.
    """
    if credentials is None:
        logger.warning("Admin access denied: no credentials supplied")
        raise _challenge("Authentication required")

    settings = request.app.state.settings
    if not credentials_match(
        credentials, settings.admin_user, settings.admin_password
    ):
        logger.warning(
            "Admin access denied: invalid credentials for user '%s'",
            credentials.username,
        )
        raise _challenge("Authentication failed")

    return credentials.username
