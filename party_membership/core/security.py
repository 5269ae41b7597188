from passlib.context import CryptContext
import hashlib
import secrets
import threading
import time

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)

def hash_admin_key(admin_key: str) -> str:
    # Normalize
    admin_key = admin_key.strip()

    # Pre-hash with SHA-256 (FIXES 72-byte limit)
    digest = hashlib.sha256(admin_key.encode("utf-8")).hexdigest()

    # bcrypt the digest
    return pwd_context.hash(digest)


def verify_admin_key(plain_key: str, hashed_key: str) -> bool:
    if not plain_key or not hashed_key:
        return False
    digest = hashlib.sha256(plain_key.strip().encode("utf-8")).hexdigest()
    return pwd_context.verify(digest, hashed_key)


class NonceStore:
    """Single-use replay-protection tokens handed out with each admin render."""

    def __init__(self, ttl_seconds: int, clock=time.monotonic):
        self._ttl = ttl_seconds
        self._clock = clock
        self._issued: dict[str, float] = {}
        self._lock = threading.Lock()

    def issue(self) -> str:
        nonce = secrets.token_urlsafe(24)
        with self._lock:
            self._purge()
            self._issued[nonce] = self._clock() + self._ttl
        return nonce

    def consume(self, nonce: str | None) -> bool:
        if not nonce:
            return False
        with self._lock:
            expires = self._issued.pop(nonce, None)
        return expires is not None and expires >= self._clock()

    def _purge(self) -> None:
        now = self._clock()
        for key in [k for k, exp in self._issued.items() if exp < now]:
            del self._issued[key]
