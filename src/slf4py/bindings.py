"""
Backend binding contracts and the binding registry.

A binding is the seam between the facade and a concrete logging backend. The
hosting application registers bindings explicitly at startup; the first one
registered is the one every logger delegates to.

Design Pattern: Strategy Pattern for backend abstraction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, Generator, List, Optional, Tuple

from .diagnostics import get_logger
from .exceptions import NoBindingFoundError
from .levels import LogLevel

_log = get_logger(__name__)


# =============================================================================
# Completion
# =============================================================================


class Completed:
    """An awaitable that is already done.

    Returned for calls filtered below the threshold, and usable by synchronous
    backends that have nothing to wait on. Awaiting it never suspends.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def done(self) -> bool:
        return True

    def result(self) -> Any:
        return self.value

    def __await__(self) -> Generator[Any, None, Any]:
        return self.value
        yield  # pragma: no cover

    def __repr__(self) -> str:
        return f"Completed({self.value!r})"


def completed(value: Any = None) -> Completed:
    """Return an already-completed awaitable resolving to ``value``."""
    return Completed(value)


# =============================================================================
# Contracts
# =============================================================================


class LoggerImplementation(ABC):
    """The single emission point of a backend."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        group: str,
        name: str,
        message: str,
        error: Optional[BaseException],
        metadata: Dict[str, Any],
    ) -> Awaitable[Any]:
        """Deliver one record; the returned awaitable completes when done."""
        ...


class Binding(ABC):
    """Describes a backend and produces its implementation."""

    @abstractmethod
    def get_vendor(self) -> str:
        ...

    @abstractmethod
    def get_version(self) -> str:
        ...

    @abstractmethod
    def get_logger_implementation(self) -> LoggerImplementation:
        ...

    def describe(self) -> str:
        return f"{self.get_vendor()} - {self.get_version()}"


# =============================================================================
# Registry
# =============================================================================


class BindingRegistry:
    """Ordered set of bindings registered by the hosting application."""

    def __init__(self, bindings: Optional[List[Binding]] = None) -> None:
        self._bindings: List[Binding] = []
        for binding in bindings or []:
            self.register(binding)

    def register(self, binding: Binding) -> None:
        """Append a binding. Registering the same object again is a no-op."""
        if any(existing is binding for existing in self._bindings):
            return
        self._bindings.append(binding)
        _log.debug("binding registered", binding=binding.describe(), position=len(self._bindings))

    def unregister(self, binding: Binding) -> None:
        self._bindings = [existing for existing in self._bindings if existing is not binding]

    def clear(self) -> None:
        self._bindings.clear()

    def discover(self) -> Tuple[Binding, ...]:
        """All registered bindings in registration order."""
        return tuple(self._bindings)

    def resolve(self) -> Binding:
        """Select the active binding: the first one registered.

        Raises:
            NoBindingFoundError: if nothing has been registered
        """
        if not self._bindings:
            raise NoBindingFoundError()
        return self._bindings[0]

    def __len__(self) -> int:
        return len(self._bindings)
