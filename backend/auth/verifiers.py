"""Identity verifiers: turn a bearer token into an ``Identity`` or raise
``AuthenticationError``."""
import logging

import requests
from flask import current_app
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from backend.auth.identity import AuthenticationError, Identity

logger = logging.getLogger(__name__)


class JwtIdentityVerifier:
    """Checks signed access tokens locally with flask-jwt-extended.

    Must be called inside an application context of an app with a
    ``JWTManager`` registered.
    """

    def verify(self, token: str) -> Identity:
        try:
            claims = decode_token(token)
        except (JWTExtendedException, PyJWTError) as exc:
            raise AuthenticationError(str(exc)) from exc

        if claims.get("type") != "access":
            raise AuthenticationError("Only access tokens are accepted")

        uid = claims.get(current_app.config["JWT_IDENTITY_CLAIM"])
        if not uid:
            raise AuthenticationError("Token has no identity claim")
        return Identity(uid=str(uid), claims=claims)


class UserinfoIdentityVerifier:
    """Delegates verification to an OpenID Connect userinfo endpoint.

    The provider validates the token; a 2xx answer with a subject means the
    caller is who the token says.
    """

    def __init__(self, userinfo_url: str, timeout: float = 10):
        self.userinfo_url = userinfo_url
        self.timeout = timeout

    def verify(self, token: str) -> Identity:
        try:
            resp = requests.get(
                self.userinfo_url,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            userinfo = resp.json()
        except requests.RequestException as exc:
            raise AuthenticationError(f"Identity provider rejected the token: {exc}") from exc
        except ValueError as exc:
            raise AuthenticationError("Identity provider returned invalid JSON") from exc

        if not isinstance(userinfo, dict):
            raise AuthenticationError("Identity provider returned invalid JSON")
        uid = userinfo.get("sub") or userinfo.get("uid")
        if not uid:
            raise AuthenticationError("Identity provider returned no subject")
        return Identity(uid=str(uid), claims=userinfo)


def build_verifier(config):
    provider = config.get("AUTH_PROVIDER", "jwt")
    if provider == "userinfo":
        url = config.get("IDENTITY_USERINFO_URL")
        if not url:
            logger.warning("AUTH_PROVIDER is 'userinfo' but IDENTITY_USERINFO_URL is not set")
        return UserinfoIdentityVerifier(url, timeout=float(config.get("IDENTITY_TIMEOUT_SECONDS", 10)))
    if provider != "jwt":
        raise ValueError(f"Unknown AUTH_PROVIDER: {provider!r}")
    return JwtIdentityVerifier()
