"""HTTP basic auth for operator endpoints."""

import secrets
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

basic_security = HTTPBasic()

# Set by app.py; None refuses everyone
_auth = None


def init(auth_config):
    """Initialize with the AuthConfig holding the expected credentials."""
    global _auth
    _auth = auth_config


def _unauthorized(detail):
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def verify_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_security)):
    if _auth is None or not _auth.configured:
        raise _unauthorized("Authentication not configured")

    username_ok = secrets.compare_digest(credentials.username.encode(), _auth.username.encode())
    password_ok = secrets.compare_digest(credentials.password.encode(), _auth.password.encode())
    if not (username_ok and password_ok):
        raise _unauthorized("Invalid credentials")
    return credentials.username
