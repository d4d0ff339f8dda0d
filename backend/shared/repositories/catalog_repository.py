from typing import List, Optional, Tuple, Type

from sqlalchemy import select, func, and_
from sqlalchemy.orm import Session, joinedload

from backend.shared.models.catalog import Material, Vehicle
from backend.shared.query.compiler import compile_ordering, compile_predicate, compile_predicates
from backend.shared.query.criteria import ListingProfile, QueryPlan
from backend.shared.query.profiles import MATERIAL_PROFILE, VEHICLE_PROFILE
from backend.shared.repositories.base import BaseRepository, ModelType, RecordId, session_scope
from backend.shared.config.logging_config import get_logger

logger = get_logger(__name__)


class CatalogRepository(BaseRepository[ModelType]):
    """Repository for a catalog entity type that belongs to a partner."""

    def __init__(
        self,
        model_class: Type[ModelType],
        profile: ListingProfile,
        owner_field: str,
        owner_relationship: str,
    ):
        """
        Args:
            model_class: SQLAlchemy model class
            profile: Filtering description of the entity type
            owner_field: Column holding the owning partner's id
            owner_relationship: Relationship attribute loading that partner
        """
        super().__init__(model_class)
        self.profile = profile
        self.owner_field = owner_field
        self.owner_relationship = owner_relationship

    def _with_owner(self):
        return joinedload(getattr(self.model_class, self.owner_relationship))

    def get_with_owner(
        self,
        record_id: RecordId,
        db_session: Optional[Session] = None
    ) -> Optional[ModelType]:
        """
        Get a record by ID with its owning partner loaded.

        Args:
            record_id: ID of the record
            db_session: Optional database session

        Returns:
            Record if found, otherwise None
        """
        with session_scope(db_session) as session:
            query = (
                select(self.model_class)
                .options(self._with_owner())
                .where(self.model_class.id == record_id)
            )
            return session.execute(query).unique().scalar_one_or_none()

    def owner_id_of(self, record: ModelType):
        """Return the owning partner id of a record."""
        return getattr(record, self.owner_field)

    def search(
        self,
        plan: QueryPlan,
        db_session: Optional[Session] = None
    ) -> Tuple[List[ModelType], int]:
        """
        Execute a query plan.

        The total is counted over the full filtered set, independently of the
        page window, and the page is fetched with a second statement. The two
        statements are not isolated from concurrent writers, so under a racing
        create/delete they may disagree by a few rows.

        Args:
            plan: Query plan built from listing criteria
            db_session: Optional database session

        Returns:
            Tuple of (records on the requested page, total matching records)
        """
        with session_scope(db_session) as session:
            where_clause = and_(*compile_predicates(self.model_class, plan.predicates))

            count_query = (
                select(func.count())
                .select_from(self.model_class)
                .where(where_clause)
            )
            total_count = session.execute(count_query).scalar() or 0

            query = (
                select(self.model_class)
                .options(self._with_owner())
                .where(where_clause)
                .order_by(*compile_ordering(self.model_class, plan.ordering))
                .offset(plan.offset)
                .limit(plan.limit)
            )
            records = list(session.execute(query).unique().scalars().all())

            logger.debug(
                f"{self.profile.label} search matched {total_count} records",
                extra={"offset": plan.offset, "limit": plan.limit, "returned": len(records)}
            )
            return records, total_count

    def get_categories(
        self,
        include_unavailable: bool = True,
        db_session: Optional[Session] = None
    ) -> List[str]:
        """
        Get the distinct categories present in the catalog.

        Args:
            include_unavailable: Also count records that are not publicly listed
            db_session: Optional database session

        Returns:
            Sorted list of unique categories
        """
        with session_scope(db_session) as session:
            column = getattr(self.model_class, self.profile.category_field)
            query = select(column).distinct()
            if not include_unavailable:
                query = query.where(compile_predicate(self.model_class, self.profile.availability))
            results = session.execute(query.order_by(column)).scalars().all()
            return [cat for cat in results if cat]


# Singleton instances
vehicle_repository = CatalogRepository(Vehicle, VEHICLE_PROFILE, "owner_id", "owner")
material_repository = CatalogRepository(Material, MATERIAL_PROFILE, "supplier_id", "supplier")
