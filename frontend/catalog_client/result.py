from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Result:
    """
    Outcome of a store operation.

    success is False whenever the local collection was left untouched;
    message is always suitable for display.
    """
    success: bool
    message: str
    data: Any = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "Result":
        return cls(True, message, data)

    @classmethod
    def fail(cls, message: str) -> "Result":
        return cls(False, message)

    def to_dict(self) -> Dict[str, Any]:
        out = {"success": self.success, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out
