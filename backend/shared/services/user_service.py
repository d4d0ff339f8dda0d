from typing import Any, Dict, List

from sqlalchemy.orm import Session

from backend.shared.auth.principal import Principal
from backend.shared.config.logging_config import get_logger
from backend.shared.errors import ConflictError, NotFoundError
from backend.shared.models.user import ServiceRequest, User
from backend.shared.repositories.user_repository import UserRepository, user_repository

logger = get_logger(__name__)


class UserService:
    """Profile, order history and account removal for the acting user."""

    def __init__(self, db_session: Session, repository: UserRepository = user_repository):
        self.db = db_session
        self.repository = repository

    def get_profile(self, principal: Principal) -> User:
        user = self.repository.get_by_id(principal.id, db_session=self.db)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, principal: Principal, data: Dict[str, Any]) -> User:
        """
        Update the acting user's profile.

        Raises:
            NotFoundError: If the account no longer exists
            ConflictError: If the new email belongs to another account
        """
        self.get_profile(principal)

        email = data.get("email")
        if email and self.repository.email_taken_by_other(email, principal.id, db_session=self.db):
            raise ConflictError("Email is already registered to another account")

        user = self.repository.update(principal.id, data, db_session=self.db)
        logger.info(f"Updated profile of user {principal.id}")
        return user

    def orders(self, principal: Principal) -> List[ServiceRequest]:
        return self.repository.get_orders(principal.id, db_session=self.db)

    def delete_account(self, principal: Principal) -> None:
        """Remove the acting user's service requests, then the account itself."""
        if not self.repository.delete_with_requests(principal.id, db_session=self.db):
            raise NotFoundError("User not found")
