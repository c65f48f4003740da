"""Formatter registry: style name -> process-wide singleton formatter.

Names are canonicalized the way built-in formatters are named:
"nested" -> "NestedFormatter". Each canonical name maps to a factory; the
first resolve() of a name builds one instance and caches it for the
lifetime of the process. There is no teardown.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from cmdline_reporter.domain.exceptions import InvalidFormatterError
from cmdline_reporter.domain.ports.formatter import FormatterProtocol

logger = logging.getLogger(__name__)

FormatterFactory = Callable[[], FormatterProtocol]
F = TypeVar("F", bound=Callable[[], FormatterProtocol])


def canonical_name(name: str) -> str:
    """Canonical registry key: "nested", "NESTED", "Nested" all give "NestedFormatter"."""
    return f"{name.capitalize()}Formatter"


class FormatterRegistry:
    """Explicit map of canonical names to factories, with a singleton cache.

    Attributes:
        _factories: Canonical name -> factory.
        _instances: Canonical name -> instance built by the factory.
    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._factories: dict[str, FormatterFactory] = {}
        self._instances: dict[str, FormatterProtocol] = {}

    def register(self, name: str, factory: FormatterFactory) -> None:
        """Register factory under name. Replaces any earlier registration.

        Raises:
            InvalidFormatterError: name is empty or not a string.
        """
        if not isinstance(name, str) or not name:
            raise InvalidFormatterError(name)
        key = canonical_name(name)
        self._factories[key] = factory
        # Re-registration drops the stale singleton
        self._instances.pop(key, None)
        logger.debug("Registered formatter %s", key)

    def resolve(self, name: str) -> FormatterProtocol:
        """Singleton formatter for name, built on first use.

        Raises:
            InvalidFormatterError: Nothing registered under name.
        """
        if not isinstance(name, str) or not name:
            raise InvalidFormatterError(name)
        key = canonical_name(name)

        instance = self._instances.get(key)
        if instance is not None:
            return instance

        factory = self._factories.get(key)
        if factory is None:
            raise InvalidFormatterError(name)

        instance = factory()
        self._instances[key] = instance
        logger.debug("Created formatter %s", key)
        return instance

    def names(self) -> tuple[str, ...]:
        """Registered canonical names, sorted."""
        return tuple(sorted(self._factories))

    def __contains__(self, name: object) -> bool:
        """True if name resolves."""
        return isinstance(name, str) and bool(name) and canonical_name(name) in self._factories


_REGISTRY = FormatterRegistry()


def get_formatter_registry() -> FormatterRegistry:
    """Process-wide registry. Built-in formatters register on import."""
    return _REGISTRY


def register_formatter(name: str) -> Callable[[F], F]:
    """Decorator to register a formatter class (or factory) by name.

    Example:
        >>> @register_formatter("quiet")
        ... class QuietFormatter(BaseFormatter):
        ...     ...
    """

    def decorator(factory: F) -> F:
        _REGISTRY.register(name, factory)
        return factory

    return decorator


def resolve_formatter(name: str) -> FormatterProtocol:
    """Resolve name in the process-wide registry."""
    return _REGISTRY.resolve(name)
