import logging

from flask import g, request

from backend.auth.identity import AuthenticationError
from backend.utils.errors import ErrorKind
from backend.utils.responses import error_response

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def init_auth_guard(app, verifier):
    """Require a verified bearer token on every request to ``app``.

    The verified ``Identity`` is stored on ``g.identity``.
    """

    @app.before_request
    def require_identity():
        # CORS preflight carries no credentials
        if request.method == "OPTIONS":
            return None

        authorization = request.headers.get("Authorization", "")
        token = authorization[len(BEARER_PREFIX):].strip() if authorization.startswith(BEARER_PREFIX) else ""
        if not token:
            return error_response(ErrorKind.UNAUTHORIZED.http_status)

        try:
            g.identity = verifier.verify(token)
        except AuthenticationError as exc:
            logger.info("Rejected token for %s %s: %s", request.method, request.path, exc)
            return error_response(ErrorKind.UNAUTHORIZED.http_status)
        return None

    return require_identity
