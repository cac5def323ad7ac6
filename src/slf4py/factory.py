"""
Logger factory and the process-wide default factory.

``LoggerFactory`` is an explicit context object: it owns the instance cache
and is handed a binding registry and a level registry. The module-level
helpers below operate on a lazily built default factory for applications
that prefer not to pass one around.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .bindings import Binding, BindingRegistry, LoggerImplementation
from .config import LoggingSettings
from .configuration import LogLevelChangedCallback, LoggerConfiguration, Subscription
from .diagnostics import get_logger as get_diagnostic_logger
from .exceptions import ConfigurationError, NoBindingFoundError
from .instance import LoggerInstance
from .levels import LogLevel

_log = get_diagnostic_logger(__name__)

CacheKey = Tuple[str, str]


class LoggerFactory:
    """Hands out one cached ``LoggerInstance`` per (group, name).

    The binding is resolved on the first ``get_logger`` call. A missing
    binding, or a binding whose implementation cannot be created, is fatal:
    the error is remembered and re-raised without retrying until
    ``reset(reset_binding=True)``.
    """

    def __init__(
        self,
        bindings: Optional[BindingRegistry] = None,
        configuration: Optional[LoggerConfiguration] = None,
    ) -> None:
        self._bindings = bindings if bindings is not None else BindingRegistry()
        self._configuration = configuration if configuration is not None else LoggerConfiguration()
        self._cache: Dict[CacheKey, LoggerInstance] = {}
        self._initialized = False
        self._failure: Optional[Exception] = None
        self._binding: Optional[Binding] = None
        self._impl: Optional[LoggerImplementation] = None

    @property
    def bindings(self) -> BindingRegistry:
        return self._bindings

    @property
    def configuration(self) -> LoggerConfiguration:
        return self._configuration

    @property
    def binding(self) -> Optional[Binding]:
        """The active binding, once resolved."""
        return self._binding

    @property
    def root_logger(self) -> LoggerInstance:
        return self.get_logger()

    # =========================================================================
    # Public API
    # =========================================================================

    def get_logger(self, group: str = "", name: str = "") -> LoggerInstance:
        """Return the cached logger for (group, name), creating it on a miss.

        Raises:
            NoBindingFoundError: if no binding is registered
            Exception: whatever the binding raised while creating its
                implementation, remembered like a missing binding
        """
        if not self._initialized:
            self._initialized = True
            self._initialize()
        if self._failure is not None:
            raise self._failure

        key = (group or "", name or "")
        instance = self._cache.get(key)
        if instance is not None:
            return instance

        instance = LoggerInstance(
            key[0],
            key[1],
            self._configuration.get_log_level(*key),
            self._implementation(),
            self._configuration,
        )
        self._cache[key] = instance
        _log.debug("logger created", group=key[0], name=key[1], level=instance.get_log_level().name)
        return instance

    def reset(self, reset_binding: bool = False) -> None:
        """Clear the instance cache.

        Cached instances stop following configuration changes. With
        ``reset_binding`` the binding is resolved again on next access.
        """
        for instance in self._cache.values():
            instance.detach()
        self._cache.clear()
        if reset_binding:
            self._initialized = False
            self._failure = None
            self._binding = None
            self._impl = None
        _log.debug("logger factory reset", reset_binding=reset_binding)

    # =========================================================================
    # Initialization
    # =========================================================================

    def _initialize(self) -> None:
        try:
            binding = self._bindings.resolve()
        except NoBindingFoundError as exc:
            self._failure = exc
            _log.error("no logger binding found")
            raise

        try:
            implementation = binding.get_logger_implementation()
        except Exception as exc:
            self._failure = exc
            _log.error("logger implementation unavailable", binding=binding.describe(), error=repr(exc))
            raise

        self._binding = binding
        self._impl = implementation
        _log.debug("binding resolved", binding=binding.describe())
        root_logger = self.get_logger()

        candidates = self._bindings.discover()
        if len(candidates) > 1:
            lines = ["multiple bindings found:"]
            lines.extend(f"  {candidate.describe()}" for candidate in candidates)
            lines.append(f"  using {binding.describe()}")
            root_logger.info("\n".join(lines))

    def _implementation(self) -> LoggerImplementation:
        if self._impl is None:
            raise ConfigurationError("Logger factory has no bound implementation", code="NOT_INITIALIZED")
        return self._impl


# =============================================================================
# Default Factory
# =============================================================================

_default_factory: Optional[LoggerFactory] = None


def get_default_factory() -> LoggerFactory:
    """Return the process-wide factory, building it from settings on first use."""
    global _default_factory
    if _default_factory is None:
        configuration = LoggerConfiguration.from_settings(LoggingSettings())
        _default_factory = LoggerFactory(BindingRegistry(), configuration)
    return _default_factory


def set_default_factory(factory: Optional[LoggerFactory]) -> None:
    """Replace the process-wide factory; ``None`` rebuilds it on next use."""
    global _default_factory
    _default_factory = factory


def register_binding(binding: Binding) -> None:
    get_default_factory().bindings.register(binding)


def get_logger(group: str = "", name: str = "") -> LoggerInstance:
    return get_default_factory().get_logger(group, name)


def reset(reset_binding: bool = False) -> None:
    get_default_factory().reset(reset_binding)


def get_log_level(group: Optional[str] = None, name: Optional[str] = None) -> LogLevel:
    return get_default_factory().configuration.get_log_level(group, name)


def set_log_level(level: LogLevel | int | str, group: Optional[str] = None, name: Optional[str] = None) -> None:
    get_default_factory().configuration.set_log_level(level, group, name)


def on_log_level_changed(
    callback: LogLevelChangedCallback,
    group: Optional[str] = None,
    name: Optional[str] = None,
) -> Subscription:
    return get_default_factory().configuration.on_log_level_changed(callback, group, name)
