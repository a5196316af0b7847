from feedback_ledger.api.contract import FeedbackContract
from feedback_ledger.core.context import CallContext
from feedback_ledger.schemas.result import ContractResult

__all__ = ["FeedbackContract", "CallContext", "ContractResult"]
