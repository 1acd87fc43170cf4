"""JWT access tokens.

Tokens are HS256-signed with the configured secret and carry:
- sub: user id
- username
- iat / exp: issue and expiry times (Unix seconds)

validate_access_token() only guarantees a genuine, unexpired token. Whether
it names a user (the sub claim) is checked by the Credential Verifier in
auth.decorators, which also turns PyJWT's exceptions into AuthenticationError.
"""

from datetime import timedelta

import jwt
from pydantic import ValidationError

from ..utils import isodatetime
from .schemas import TokenPayload, UserSummary

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["iat", "exp"]


def generate_access_token(user: UserSummary, secret: str, expiry_days: int = 30) -> str:
    """Sign an access token for the user.

    Args:
        user: User the token identifies (only id and username are embedded)
        secret: Signing secret (Settings.jwt_secret_key)
        expiry_days: Token lifetime in days

    Returns:
        Encoded JWT string
    """
    issued_at = isodatetime.now_unix()
    payload = {
        "sub": user.id,
        "username": user.username,
        "iat": issued_at,
        "exp": issued_at + int(timedelta(days=expiry_days).total_seconds()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_access_token(token: str, secret: str) -> TokenPayload:
    """Verify signature and expiry and return the decoded claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed, forged, lacks
            iat/exp, or carries claims of the wrong type
    """
    payload = jwt.decode(
        token,
        secret,
        algorithms=[ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
    try:
        return TokenPayload(**payload)
    except ValidationError as e:
        raise jwt.InvalidTokenError(f"Malformed token claims ({e.error_count()} error(s))") from e


def get_token_expiry_remaining(token: str, secret: str) -> int:
    """Seconds until the token expires (0 if already expired).

    Raises:
        jwt.InvalidTokenError: If the signature does not verify
    """
    payload = jwt.decode(
        token,
        secret,
        algorithms=[ALGORITHM],
        options={"verify_exp": False, "require": REQUIRED_CLAIMS},
    )
    return max(0, payload["exp"] - isodatetime.now_unix())
