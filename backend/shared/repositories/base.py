from contextlib import contextmanager
from typing import Any, Dict, Generator, Generic, Optional, Type, TypeVar, Union

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from backend.shared.database.session import get_db_session
from backend.shared.config.logging_config import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")
RecordId = Union[int, str]


@contextmanager
def session_scope(db_session: Optional[Session] = None) -> Generator[Session, None, None]:
    """
    Use the caller's session if given, otherwise open a managed one.

    A caller-owned session is left open so objects stay attached to it.
    """
    if db_session is not None:
        yield db_session
    else:
        with get_db_session() as session:
            yield session


class BaseRepository(Generic[ModelType]):
    """
    Single-record persistence for one model.

    Every write is committed on its own, so a create, update or delete either
    lands completely or raises.
    """

    def __init__(self, model_class: Type[ModelType]):
        self.model_class = model_class
        self._column_keys = frozenset(attr.key for attr in inspect(model_class).column_attrs)

    def writable(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only keys that name a mapped column of the model."""
        return {key: value for key, value in data.items() if key in self._column_keys}

    def get_by_id(self, record_id: RecordId, db_session: Optional[Session] = None) -> Optional[ModelType]:
        """
        Look a record up by primary key.

        Returns:
            The record, or None when no row has that key
        """
        with session_scope(db_session) as session:
            return session.get(self.model_class, record_id)

    def create(self, data: Dict[str, Any], db_session: Optional[Session] = None) -> ModelType:
        """
        Insert a record built from ``data`` and return it with generated
        values (id, timestamps) populated.
        """
        with session_scope(db_session) as session:
            record = self.model_class(**self.writable(data))
            session.add(record)
            session.commit()
            session.refresh(record)
            logger.debug(f"Inserted {self.model_class.__name__} {record.id}")
            return record

    def update(
        self,
        record_id: RecordId,
        changes: Dict[str, Any],
        db_session: Optional[Session] = None
    ) -> Optional[ModelType]:
        """
        Apply a partial update. Columns absent from ``changes`` keep their value.

        Returns:
            The updated record, or None when it does not exist
        """
        with session_scope(db_session) as session:
            record = session.get(self.model_class, record_id)
            if record is None:
                return None

            for column, value in self.writable(changes).items():
                setattr(record, column, value)
            session.commit()
            session.refresh(record)
            return record

    def delete(self, record_id: RecordId, db_session: Optional[Session] = None) -> bool:
        """
        Remove a record.

        Returns:
            False when there was nothing to remove
        """
        with session_scope(db_session) as session:
            record = session.get(self.model_class, record_id)
            if record is None:
                return False

            session.delete(record)
            session.commit()
            return True
