"""Protocol definitions for dependency inversion."""

from typing import Any, Awaitable, Optional, Protocol, TypeVar, runtime_checkable

from .models import StepResult

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Resumable(Protocol[T_co]):
    """Protocol for anything driven by explicit resume calls.

    Objects with a ``resume`` returning StepResult can be handed to the
    consumers directly, without implementing the iterator protocol.
    """

    def resume(self, signal: Optional[Any] = None) -> StepResult:
        """Advance one step and report the produced value."""
        ...


class AsyncOperation(Protocol):
    """Protocol for a long-running operation retried by the retry driver."""

    def __call__(self) -> Awaitable[None]:
        """Start one attempt."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        ...
