"""Tagged results returned by the store.

Every store operation that can fail returns either ``Ok`` wrapping the
value or ``Err`` wrapping the domain exception that rejected it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from stockroom.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: DomainException

    @property
    def message(self) -> str:
        return str(self.error)

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the wrapped error."""
        raise self.error


Result = Union[Ok[T], Err]
