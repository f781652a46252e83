"""
Base interfaces and abstract classes for the domain layer.
"""

from abc import ABC
from typing import Any, Optional, Protocol, Sequence


class ILogger(Protocol):
    """Logger interface for dependency injection."""

    def debug(self, message: str, **kwargs: Any) -> None: ...
    def info(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def critical(self, message: str, **kwargs: Any) -> None: ...


class IReporter(Protocol):
    """Presentation interface for institution listings and search outcomes."""

    def print_heading(self, title: str) -> None: ...
    def print_institutions(self, institutions: Optional[Sequence[Any]]) -> None: ...
    def print_search_result(self, result: Any) -> None: ...
    def print_absent_index(self, index: int) -> None: ...


class ValueObject(ABC):
    """Base class for value objects."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))
