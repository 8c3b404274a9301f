"""
Success-or-failure values returned by every public operation.
"""

from dataclasses import dataclass
from typing import Any, Union

from .exceptions import MomoError


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    error: Any

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the carried error."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise MomoError(str(self.error), response_data=self.error)


Result = Union[Ok, Err]
