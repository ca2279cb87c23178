"""
Email one-time-password exchange.

A code is issued for an email address, mailed in clear text and consumed by
the first verification that presents it. Codes live in an ``OtpStore`` owned
by the application; a new issue for the same address replaces the old code.
"""
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

from app.core import errors
from app.auth.utils import generate_otp

logger = logging.getLogger(__name__)


class OtpStore(ABC):
    @abstractmethod
    def put(self, email: str, code: str, expires_at: Optional[float]) -> None:
        """Store ``code`` for ``email``, replacing any previous entry."""

    @abstractmethod
    def get(self, email: str) -> Optional[str]:
        """Return the live code for ``email``, or None."""

    @abstractmethod
    def consume(self, email: str, code: str) -> bool:
        """Remove the entry and return True only if ``code`` is the live code."""


class InMemoryOtpStore(OtpStore):
    """
    Process-local store. Expired entries are dropped when read and on every
    ``put``, so codes that are never verified do not accumulate.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}
        self._lock = threading.Lock()

    def _live(self, email: str) -> Optional[str]:
        entry = self._entries.get(email)
        if entry is None:
            return None
        code, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[email]
            return None
        return code

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [
            email for email, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for email in expired:
            del self._entries[email]

    def put(self, email: str, code: str, expires_at: Optional[float]) -> None:
        with self._lock:
            self._purge_expired()
            self._entries[email] = (code, expires_at)

    def get(self, email: str) -> Optional[str]:
        with self._lock:
            return self._live(email)

    def consume(self, email: str, code: str) -> bool:
        with self._lock:
            live = self._live(email)
            if live is None or live != code:
                return False
            del self._entries[email]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class OtpExchange:
    def __init__(
        self,
        store: OtpStore,
        send_email: Callable[[str, str], bool],
        ttl_seconds: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.send_email = send_email
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, email: Optional[str]) -> str:
        if not email:
            raise errors.ValidationError("Email required")

        code = generate_otp()
        expires_at = self._clock() + self.ttl_seconds if self.ttl_seconds else None
        self.store.put(email, code, expires_at)

        # The code stays stored even when the mail is not delivered
        if not self.send_email(email, code):
            logger.error("OTP dispatch to %s failed", email)
            raise errors.DispatchError()

        logger.info("OTP issued for %s", email)
        return code

    def verify(self, email: Optional[str], code: Optional[str]) -> None:
        if not email or not code:
            raise errors.ValidationError("Email and OTP required")
        if not self.store.consume(email, code):
            raise errors.InvalidOtp()
        logger.info("OTP verified for %s", email)
