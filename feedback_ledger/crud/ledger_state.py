from sqlalchemy.orm import Session
from feedback_ledger.crud.base import CRUDBase
from feedback_ledger.models.ledger_state import LedgerState

LEDGER_STATE_ID = 1


class CRUDLedgerState(CRUDBase[LedgerState]):

    def get_or_create(self, db: Session) -> LedgerState:
        state = self.get(db, LEDGER_STATE_ID)
        if state is None:
            state = self.add(db, LedgerState(id=LEDGER_STATE_ID, event_count=0, last_height=0))
        return state

    def get_event_count(self, db: Session) -> int:
        state = self.get(db, LEDGER_STATE_ID)
        return state.event_count if state else 0

    def allocate_event_id(self, db: Session) -> int:
        state = self.get_or_create(db)
        state.event_count += 1
        db.flush()
        return state.event_count

    def observe_height(self, db: Session, *, height: int) -> bool:
        """Record height as the latest seen; False if it is lower than a previous one"""
        state = self.get_or_create(db)
        if height < state.last_height:
            return False
        state.last_height = height
        db.flush()
        return True

ledger_state = CRUDLedgerState(LedgerState)
