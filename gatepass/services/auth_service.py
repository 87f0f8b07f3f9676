# gatepass/services/auth_service.py
"""
Credential check against the seeded user list.
Plain string equality on username and password. No hashing, lockout or tokens.
"""

from gatepass.schemas.user import User, UserProfile
from gatepass.services.snapshot_store import SnapshotStore
from gatepass.utils.exceptions import AuthFailedError
from gatepass.utils.logger import get_logger

logger = get_logger(__name__)


def check_credentials(users: list[User], username: str, password: str) -> UserProfile:
    """Return the matching user's profile (never the password) or raise AuthFailedError."""
    for user in users:
        if user.username == username and user.password == password:
            return UserProfile(id=user.id, username=user.username, role=user.role, name=user.name)
    raise AuthFailedError("Invalid username or password")


class AuthService:
    """Handles login for students, moderators and gatekeepers."""

    def login(self, store: SnapshotStore, username: str, password: str) -> UserProfile:
        try:
            profile = check_credentials(store.load().users, username, password)
        except AuthFailedError:
            logger.warning(f"[AUTH] Failed login for username={username!r}")
            raise
        logger.info(f"[AUTH] {profile.username} logged in as {profile.role}")
        return profile
