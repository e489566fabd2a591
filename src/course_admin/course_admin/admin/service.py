from __future__ import annotations

import hmac
import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import ADMIN_LOGIN_PATH
from ..core.exceptions import AuthenticationError, ValidationError
from ..database.store import RealtimeStore

logger = logging.getLogger(__name__)

_HASH_PREFIXES = ("pbkdf2:", "scrypt:")


class AdminAuthService:
    """Use case: check admin credentials against the ``AdminLogin`` node."""

    def __init__(self, store: RealtimeStore):
        self._store = store

    def authenticate(self, user_id, password) -> None:
        admin = self._store.get(ADMIN_LOGIN_PATH)
        if not isinstance(admin, dict):
            logger.warning("Admin login attempted but %s is not configured", ADMIN_LOGIN_PATH)
            raise AuthenticationError("Invalid credentials")

        stored_user = str(admin.get("userid") or "")
        stored_password = str(admin.get("password") or "")
        if not user_id or not password or not stored_user or not stored_password:
            raise AuthenticationError("Invalid credentials")

        if stored_password.startswith(_HASH_PREFIXES):
            password_ok = check_password_hash(stored_password, str(password))
        else:
            password_ok = hmac.compare_digest(stored_password, str(password))

        if not (hmac.compare_digest(stored_user, str(user_id)) and password_ok):
            raise AuthenticationError("Invalid credentials")

    def set_credentials(self, user_id, password) -> None:
        """Replace the admin credentials, storing a salted hash of the password."""
        user_id = str(user_id or "").strip()
        if not user_id or not password:
            raise ValidationError("userId and password are required")
        self._store.set(ADMIN_LOGIN_PATH, {"userid": user_id, "password": generate_password_hash(str(password))})
        logger.info("Admin credentials updated for %s", user_id)
