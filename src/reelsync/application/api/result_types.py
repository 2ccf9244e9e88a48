"""
Result Types for Session Commands

Structured return values for the input events handled by EditorSession.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar


class ResultStatus(Enum):
    """Status of a command execution"""
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


T = TypeVar('T')


@dataclass
class CommandResult(Generic[T]):
    """
    Outcome of one input event.

    - SUCCESS: applied as given
    - WARNING: applied after adjustment (e.g. a clamped value)
    - ERROR: rejected; the previous state is unchanged
    """
    status: ResultStatus
    message: str
    data: Optional[T] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True unless the command was rejected"""
        return self.status != ResultStatus.ERROR

    @property
    def failed(self) -> bool:
        return self.status == ResultStatus.ERROR

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def success_result(cls, message: str, data: T = None) -> 'CommandResult[T]':
        return cls(status=ResultStatus.SUCCESS, message=message, data=data)

    @classmethod
    def warning_result(cls, message: str, data: T = None, warnings: List[str] = None) -> 'CommandResult[T]':
        return cls(
            status=ResultStatus.WARNING,
            message=message,
            data=data,
            warnings=warnings or [message]
        )

    @classmethod
    def error_result(cls, message: str, errors: List[str] = None) -> 'CommandResult[T]':
        return cls(
            status=ResultStatus.ERROR,
            message=message,
            errors=errors or [message]
        )
