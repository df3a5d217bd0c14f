"""
session_service.py - Signed-in user record
Single responsibility: keep the display identity used by the login gate.

There is no credential check; the stored email only drives the greeting and
decides whether the login view is shown.
"""
import logging

from uxdebt.config import USER_KEY
from uxdebt.database.store import CollectionStore
from uxdebt.domain.errors import ValidationError
from uxdebt.domain.models import UserIdentity

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, store: CollectionStore):
        self.store = store

    def current_user(self) -> UserIdentity | None:
        record = self.store.load_record(USER_KEY)
        if not record or not record.get("email"):
            return None
        return UserIdentity(email=str(record["email"]))

    def is_signed_in(self) -> bool:
        return self.current_user() is not None

    def sign_in(self, email: str) -> UserIdentity:
        email = (email or "").strip()
        if not email or "@" not in email:
            raise ValidationError({"email": "Enter a valid email address"})
        self.store.save_record(USER_KEY, {"email": email})
        logger.info("Signed in as %s", email)
        return UserIdentity(email=email)

    def sign_out(self) -> None:
        self.store.delete(USER_KEY)
