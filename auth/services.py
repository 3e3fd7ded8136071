# src/auth/services.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Set, Union

import requests
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from auth.models import User
from auth.schemas import Principal
from config import settings
from errors import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)


class IdentityProvider:
    """Verifies ID tokens issued by the external identity provider.

    Signing keys come from the provider's JWKS endpoint, fetched on first use
    and again whenever a token names a key id the cached set lacks. When no
    JWKS URL is configured a
    shared secret is used instead, which is what local development and the
    test suite run against.
    """

    def __init__(
            self,
            jwks_url: Optional[str] = None,
            secret: Optional[str] = None,
            algorithms: Optional[List[str]] = None,
            audience: Optional[str] = None,
            issuer: Optional[str] = None,
            timeout: float = 10.0,
    ):
        if not jwks_url and not secret:
            raise ValueError("Either a JWKS URL or a shared secret is required")
        self.jwks_url = jwks_url
        self.secret = secret
        self.algorithms = algorithms or ["RS256"]
        self.audience = audience
        self.issuer = issuer
        self.timeout = timeout
        self._jwks: Optional[Dict[str, Any]] = None

    def _fetch_jwks(self) -> Dict[str, Any]:
        """Download the provider's public signing keys."""
        try:
            response = requests.get(self.jwks_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"JWKS fetch from {self.jwks_url} failed: {str(e)}")
            raise Unauthenticated("Identity provider unavailable")
        if response.status_code != 200:
            logger.error(f"JWKS fetch failed: {response.status_code} - {response.text}")
            raise Unauthenticated("Identity provider unavailable")
        return response.json()

    def _known_key_ids(self) -> Set[str]:
        return {key.get("kid") for key in (self._jwks or {}).get("keys", [])}

    def verification_key(self, kid: Optional[str] = None) -> Union[str, Dict[str, Any]]:
        """Return the key material for a token signed with ``kid``.

        The provider rotates its keys, so an unknown key id triggers a fresh
        download of the JWKS document.
        """
        if not self.jwks_url:
            return self.secret
        if self._jwks is None or (kid is not None and kid not in self._known_key_ids()):
            self._jwks = self._fetch_jwks()
            logger.info(f"Loaded {len(self._jwks.get('keys', []))} signing keys from {self.jwks_url}")
        return self._jwks

    def verify_id_token(self, token: str) -> Principal:
        """Decode and validate a token, returning the caller it identifies."""
        try:
            kid = jwt.get_unverified_header(token).get("kid") if self.jwks_url else None
            claims = jwt.decode(
                token,
                self.verification_key(kid),
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None, "verify_exp": True},
            )
        except JWTError as e:
            logger.warning(f"Rejected ID token: {str(e)}")
            raise Unauthenticated("Invalid token")
        user_id = claims.get("sub") or claims.get("user_id")
        if not user_id:
            raise Unauthenticated("Invalid token")
        return Principal(id=user_id, claims=claims)

    def issue_token(self, user_id: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
        """Sign a token with the shared secret, for local development and tests."""
        if not self.secret:
            raise RuntimeError("Tokens can only be issued with a shared secret")
        to_encode = dict(claims)
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))
        to_encode.update({"sub": user_id, "exp": expire})
        if self.audience:
            to_encode.setdefault("aud", self.audience)
        if self.issuer:
            to_encode.setdefault("iss", self.issuer)
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithms[0])


_provider: Optional[IdentityProvider] = None


def get_identity_provider() -> IdentityProvider:
    """Return the process-wide identity provider, creating it on first use."""
    global _provider
    if _provider is None:
        _provider = IdentityProvider(
            jwks_url=settings.IDENTITY_JWKS_URL,
            secret=settings.IDENTITY_SECRET,
            algorithms=settings.IDENTITY_ALGORITHMS,
            audience=settings.IDENTITY_AUDIENCE,
            issuer=settings.IDENTITY_ISSUER,
            timeout=settings.IDENTITY_HTTP_TIMEOUT,
        )
    return _provider


class RoleService:
    @staticmethod
    def require_staff(user_id: str, db: Session) -> User:
        """Return the caller's profile if it carries an admin or moderator role."""
        user = db.get(User, user_id)
        if user is None:
            raise Forbidden("User profile not found")
        if user.role not in settings.STAFF_ROLES:
            raise Forbidden("Admin privileges required")
        return user
