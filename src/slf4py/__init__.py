"""
Logging facade for Python.

Application code asks for grouped, named loggers and calls leveled methods;
records are delegated to whichever backend binding the host application
registered at startup. Levels are configured per group and per name and
pushed to live loggers as they change.

Usage:
    import slf4py

    slf4py.register_binding(MyBackendBinding())
    log = slf4py.get_logger("db", "pool")
    log.info("connection opened", {"host": host})
    slf4py.set_log_level("DEBUG", "db")
"""

from .bindings import Binding, BindingRegistry, Completed, LoggerImplementation, completed
from .config import LoggingSettings
from .configuration import LogLevelChangedEvent, LoggerConfiguration, Subscription
from .exceptions import ConfigurationError, InvalidLogLevelError, NoBindingFoundError, Slf4pyError
from .factory import (
    LoggerFactory,
    get_default_factory,
    get_log_level,
    get_logger,
    on_log_level_changed,
    register_binding,
    reset,
    set_default_factory,
    set_log_level,
)
from .instance import LoggerInstance, LogPayload
from .levels import LogLevel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Binding",
    "BindingRegistry",
    "Completed",
    "ConfigurationError",
    "InvalidLogLevelError",
    "LogLevel",
    "LogLevelChangedEvent",
    "LogPayload",
    "LoggerConfiguration",
    "LoggerFactory",
    "LoggerImplementation",
    "LoggerInstance",
    "LoggingSettings",
    "NoBindingFoundError",
    "Slf4pyError",
    "Subscription",
    "completed",
    "get_default_factory",
    "get_log_level",
    "get_logger",
    "on_log_level_changed",
    "register_binding",
    "reset",
    "set_default_factory",
    "set_log_level",
]
