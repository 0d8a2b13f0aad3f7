"""Outcome of a network call: either a decoded value or a classified error."""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

from .errors import APIError

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: APIError

    @property
    def is_success(self) -> Literal[False]:
        return False

    def unwrap(self):
        """Raise the carried :class:`APIError`."""
        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default


Result = Union[Success[T], Failure]
