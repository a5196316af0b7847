from pydantic import BaseModel
from typing import Generic, Optional, TypeVar
from feedback_ledger.core.exceptions import LedgerError

T = TypeVar("T")


class ContractError(BaseModel):
    code: int
    kind: str
    message: str

    @classmethod
    def from_exception(cls, exc: LedgerError) -> "ContractError":
        return cls(code=exc.code, kind=exc.kind, message=exc.message)


class ContractResult(BaseModel, Generic[T]):
    """Outcome of one entry point: either a value or an error, never both"""
    ok: bool
    value: Optional[T] = None
    error: Optional[ContractError] = None

    @classmethod
    def success(cls, value) -> "ContractResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: LedgerError) -> "ContractResult":
        return cls(ok=False, error=ContractError.from_exception(exc))

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error else None
