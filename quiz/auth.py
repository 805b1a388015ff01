"""Quiz Auth - Identidade do chamador e tokens de acesso.

All access rules go through ``AuthContext``: a resolver asks for the role it
needs (``as_student()`` / ``as_instructor()``) and gets the caller's id or an
``AuthorizationError``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from .exceptions import AuthorizationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class CallerIdentity:
    user_id: str
    is_instructor: bool = False


class AuthContext:
    """Capacidade de autorizacao do chamador atual.

    Example:
        >>> auth = AuthContext(CallerIdentity("s1"))
        >>> auth.as_student()
        's1'
        >>> auth.as_instructor()
        Traceback (most recent call last):
        AuthorizationError: Not an instructor
    """

    def __init__(self, identity: CallerIdentity | None = None):
        self.identity = identity

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def user_id(self) -> str | None:
        return self.identity.user_id if self.identity else None

    @property
    def is_instructor(self) -> bool:
        return bool(self.identity and self.identity.is_instructor)

    def _require_identity(self) -> CallerIdentity:
        if self.identity is None:
            raise AuthorizationError("Not authenticated")
        return self.identity

    def as_student(self) -> str:
        """ID do aluno autenticado, ou AuthorizationError."""
        identity = self._require_identity()
        if identity.is_instructor:
            logger.warning(f"Instrutor {identity.user_id} tentou operacao de aluno")
            raise AuthorizationError("Not a student", {"user_id": identity.user_id})
        return identity.user_id

    def as_instructor(self) -> str:
        """ID do instrutor autenticado, ou AuthorizationError."""
        identity = self._require_identity()
        if not identity.is_instructor:
            logger.warning(f"Aluno {identity.user_id} tentou operacao de instrutor")
            raise AuthorizationError("Not an instructor", {"user_id": identity.user_id})
        return identity.user_id

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls(None)


# =============================================================================
# JWT
# =============================================================================


def create_access_token(
    identity: CallerIdentity,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(minutes=60),
) -> str:
    """Emite um token de acesso para a identidade.

    Args:
        identity: Usuario e papel
        secret: Chave HMAC
        algorithm: Algoritmo JWT
        expires_delta: Validade

    Returns:
        Token JWT assinado
    """
    claims = {
        "sub": identity.user_id,
        "is_instructor": identity.is_instructor,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict[str, Any] | None:
    """Decodifica um token; None se invalido ou expirado."""
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError:
        logger.warning("JWT decode failed: token has expired.")
        return None
    except JWTError as e:
        logger.warning(f"JWT decode failed: {e}")
        return None


def auth_context_from_header(
    authorization: str | None, secret: str, algorithm: str = "HS256"
) -> AuthContext:
    """Resolve o AuthContext a partir do header ``Authorization: Bearer ...``.

    Missing or invalid tokens give an anonymous context; the resolvers decide
    whether anonymous callers are allowed.
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return AuthContext.anonymous()

    payload = decode_access_token(authorization[len(BEARER_PREFIX):].strip(), secret, algorithm)
    if not payload or not payload.get("sub"):
        return AuthContext.anonymous()

    return AuthContext(
        CallerIdentity(
            user_id=str(payload["sub"]),
            is_instructor=bool(payload.get("is_instructor", False)),
        )
    )
