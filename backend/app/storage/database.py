import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import StorageError
from app.db.base import Base
from app.storage.base import RecordT, Repository

logger = logging.getLogger(__name__)


class SqlRepository(Repository[RecordT]):
    """Stores a collection as rows of a relational table.

    Rows keep an integer surrogate key so ``load_all`` can return them in
    insertion order; records are matched on their string ``id``.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        orm_model: type[Base],
        model: type[RecordT],
    ) -> None:
        super().__init__(model)
        self.session_factory = session_factory
        self.orm_model = orm_model
        self._columns = [
            column.key for column in orm_model.__table__.columns if column.key != "pk"
        ]

    def _to_record(self, row: Any) -> RecordT:
        return self.model.model_validate(
            {key: getattr(row, key) for key in self._columns}
        )

    def _to_values(self, item: RecordT) -> dict[str, Any]:
        data = item.model_dump(mode="python")
        values = {key: data[key] for key in self._columns if key in data}
        # Store enum members as their plain string values.
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in values.items()
        }

    def load_all(self) -> list[RecordT]:
        try:
            with self.session_factory() as db:
                rows = db.query(self.orm_model).order_by(self.orm_model.pk).all()
                return [self._to_record(row) for row in rows]
        except (SQLAlchemyError, PydanticValidationError) as e:
            logger.error(f"Error reading table {self.orm_model.__tablename__}, treating as empty: {e}")
            return []

    def save_all(self, items: Sequence[RecordT]) -> None:
        db = self.session_factory()
        try:
            for item in items:
                values = self._to_values(item)
                row = (
                    db.query(self.orm_model)
                    .filter(self.orm_model.id == values["id"])
                    .first()
                )
                if row is None:
                    db.add(self.orm_model(**values))
                    # Flush per row so surrogate keys follow list order.
                    db.flush()
                    continue
                for key, value in values.items():
                    if getattr(row, key) != value:
                        setattr(row, key, value)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error writing table {self.orm_model.__tablename__}: {e}")
            raise StorageError(f"Could not write {self.orm_model.__tablename__}") from e
        finally:
            db.close()
