from typing import Any, Dict, List, Tuple

from sqlalchemy.orm import Session

from backend.shared.auth.principal import Principal, is_owner
from backend.shared.config.logging_config import get_logger
from backend.shared.errors import ForbiddenError, NotFoundError
from backend.shared.query.builder import build_query, paginate
from backend.shared.query.criteria import ListingCriteria, PaginationResult
from backend.shared.repositories.base import RecordId
from backend.shared.repositories.catalog_repository import CatalogRepository

logger = get_logger(__name__)

# Fields a payload may never set directly
_PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


class CatalogService:
    """
    Listing, lookup and owner-scoped mutations for one catalog entity type.

    Every existence and ownership check runs before the repository is asked
    to write anything.
    """

    def __init__(self, db_session: Session, repository: CatalogRepository):
        self.db = db_session
        self.repository = repository
        self.profile = repository.profile

    def list(self, criteria: ListingCriteria) -> Tuple[List[Any], PaginationResult]:
        """Run a filtered, sorted, paginated listing query."""
        plan = build_query(self.profile, criteria)
        records, total = self.repository.search(plan, db_session=self.db)
        return records, paginate(total, criteria.page, criteria.page_size)

    def get(self, record_id: RecordId) -> Any:
        """Get one record with its owning partner attached."""
        record = self.repository.get_with_owner(record_id, db_session=self.db)
        if record is None:
            raise NotFoundError(f"{self.profile.label} not found")
        return record

    def get_owned(self, principal: Principal, record_id: RecordId, action: str) -> Any:
        """
        Load a record the principal is about to modify.

        Raises:
            NotFoundError: If the record does not exist
            ForbiddenError: If the principal does not own it
        """
        record = self.repository.get_by_id(record_id, db_session=self.db)
        if record is None:
            raise NotFoundError(f"{self.profile.label} not found")
        if not is_owner(principal, self.repository.owner_id_of(record)):
            logger.warning(
                f"Partner {principal.partner_id} may not {action} {self.profile.name} {record_id}",
                extra={"principal_id": principal.id, "record_id": record_id}
            )
            raise ForbiddenError(f"Not authorized to {action} this {self.profile.name}")
        return record

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        protected = _PROTECTED_FIELDS | {self.repository.owner_field}
        return {key: value for key, value in data.items() if key not in protected}

    def create(self, principal: Principal, data: Dict[str, Any]) -> Any:
        """Create a record owned by the principal's partner identity."""
        record_data = self._clean(data)
        record_data[self.repository.owner_field] = principal.partner_id

        record = self.repository.create(record_data, db_session=self.db)
        logger.info(
            f"Created {self.profile.name} {record.id}",
            extra={"partner_id": principal.partner_id}
        )
        return self.get(record.id)

    def update(self, principal: Principal, record_id: RecordId, changes: Dict[str, Any]) -> Any:
        """Apply a partial update to a record the principal owns."""
        self.get_owned(principal, record_id, "update")
        self.repository.update(record_id, self._clean(changes), db_session=self.db)
        logger.info(f"Updated {self.profile.name} {record_id}", extra={"fields": sorted(changes)})
        return self.get(record_id)

    def delete(self, principal: Principal, record_id: RecordId) -> None:
        """Delete a record the principal owns."""
        self.get_owned(principal, record_id, "delete")
        self.repository.delete(record_id, db_session=self.db)
        logger.info(f"Deleted {self.profile.name} {record_id}", extra={"partner_id": principal.partner_id})

    def set_availability(
        self,
        principal: Principal,
        record_id: RecordId,
        availability: Dict[str, Any]
    ) -> Any:
        """Replace the availability sub-record of a record the principal owns."""
        self.get_owned(principal, record_id, "update")
        self.repository.update(record_id, {"availability": availability}, db_session=self.db)
        return self.get(record_id)

    def categories(self, include_unavailable: bool) -> List[str]:
        """Distinct categories present in the catalog."""
        return self.repository.get_categories(include_unavailable, db_session=self.db)
