import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from firebase_admin import auth

logger = logging.getLogger(__name__)

# Travellers sign in with Firebase on the client; the bearer token is the Firebase ID token.
bearer_token = OAuth2PasswordBearer(tokenUrl="auth/login")

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=BEARER_CHALLENGE)


def get_current_user(token: str = Depends(bearer_token)) -> dict:
    """
    Resolves the traveller behind a request.

    Returns the decoded Firebase claims; trips, packing lists and drafts are keyed
    by `uid`, while `email` and `name` feed the profile endpoint.
    """
    try:
        return auth.verify_id_token(token)
    except auth.ExpiredIdTokenError:
        raise _unauthorized("Your session has expired, please sign in again")
    except auth.InvalidIdTokenError:
        raise _unauthorized("Sign-in token is not valid")
    except Exception as e:
        logger.warning("Could not verify sign-in token: %s", e)
        raise _unauthorized("Sign-in required")
