from typing import List, Optional

from sqlalchemy import select, delete, desc
from sqlalchemy.orm import Session, joinedload

from backend.shared.models.user import ServiceRequest, User
from backend.shared.repositories.base import BaseRepository, session_scope
from backend.shared.config.logging_config import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user accounts and their service requests."""

    def __init__(self):
        """Initialize the repository with the User model."""
        super().__init__(User)

    def email_taken_by_other(
        self,
        email: str,
        user_id: int,
        db_session: Optional[Session] = None
    ) -> bool:
        """
        Check whether an email belongs to an account other than ``user_id``.

        Args:
            email: Email address to look up
            user_id: Account allowed to hold the address
            db_session: Optional database session

        Returns:
            True if another account already uses the email
        """
        with session_scope(db_session) as session:
            query = select(User.id).where(User.email == email, User.id != user_id)
            return session.execute(query).first() is not None

    def get_orders(self, user_id: int, db_session: Optional[Session] = None) -> List[ServiceRequest]:
        """
        Get a user's service requests, newest first, with the requested
        vehicle or material attached.
        """
        with session_scope(db_session) as session:
            query = (
                select(ServiceRequest)
                .options(joinedload(ServiceRequest.vehicle), joinedload(ServiceRequest.material))
                .where(ServiceRequest.user_id == user_id)
                .order_by(desc(ServiceRequest.request_date))
            )
            return list(session.execute(query).unique().scalars().all())

    def delete_with_requests(self, user_id: int, db_session: Optional[Session] = None) -> bool:
        """
        Delete a user account after removing the service requests that
        reference it. Both deletes are committed together.

        Returns:
            True if the user existed
        """
        with session_scope(db_session) as session:
            removed_requests = session.execute(
                delete(ServiceRequest).where(ServiceRequest.user_id == user_id)
            ).rowcount
            removed_users = session.execute(
                delete(User).where(User.id == user_id)
            ).rowcount
            session.commit()

            logger.info(
                f"Deleted user {user_id}",
                extra={"user_id": user_id, "service_requests_removed": removed_requests}
            )
            return removed_users > 0


# Singleton instance
user_repository = UserRepository()
