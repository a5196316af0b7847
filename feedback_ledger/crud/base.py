from typing import Any, Generic, Optional, Type, TypeVar
from sqlalchemy.orm import Session
from feedback_ledger.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Data access for one table.

    Helpers only add and flush; committing or rolling back is left to the
    caller so that one operation is one transaction.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, ident: Any) -> Optional[ModelType]:
        return db.get(self.model, ident)

    def add(self, db: Session, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        db.flush()
        return db_obj
