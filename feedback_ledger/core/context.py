from dataclasses import dataclass

from feedback_ledger.core.config import settings
from feedback_ledger.core.exceptions import InvalidInput


@dataclass(frozen=True)
class CallContext:
    """Identity and current height supplied by the host for one operation"""

    caller: str
    height: int

    def __post_init__(self):
        if not isinstance(self.caller, str) or not self.caller.strip():
            raise InvalidInput("Caller identity is required")
        if isinstance(self.height, bool) or not isinstance(self.height, int) or self.height < 0:
            raise InvalidInput("Height must be a non-negative integer")
        if self.height > settings.MAX_UINT:
            raise InvalidInput(f"Height must not exceed {settings.MAX_UINT}")
