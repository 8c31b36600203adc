"""
Checker registry for dynamic checker loading.

Provides a central registry for checker implementations, enabling
checkers to be enabled by name from configuration.
"""

from typing import Dict, Type, Optional, Any, List, Callable
import logging

from spamguard.core.checker import Checker

logger = logging.getLogger(__name__)


class CheckerRegistry:
    """
    Registry for checker implementations.

    Checkers are registered by name (e.g., 'ai', 'keywords').

    Usage:
        # Registration (usually via decorator)
        CheckerRegistry.register("ai", AIChecker)

        # Lookup
        checker_class = CheckerRegistry.get("ai")

        # Factory
        checker = CheckerRegistry.create("ai", api_key="sk-...", model="gpt-4o-mini")
    """

    _checkers: Dict[str, Type[Checker]] = {}

    @classmethod
    def register(cls, name: str, checker_class: Type[Checker]) -> None:
        """
        Register a checker class.

        Args:
            name: Checker name (e.g., 'ai', 'keywords')
            checker_class: The checker class to register
        """
        if name in cls._checkers:
            logger.warning(f"Overwriting existing checker registration: {name}")
        cls._checkers[name] = checker_class
        logger.debug(f"Registered checker: {name}")

    @classmethod
    def get(cls, name: str) -> Optional[Type[Checker]]:
        """Get a checker class by name, or None if not registered."""
        return cls._checkers.get(name)

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> Checker:
        """
        Create a checker instance.

        Args:
            name: Checker name
            **kwargs: Passed through to the checker's constructor

        Returns:
            Checker instance

        Raises:
            ValueError: If the checker name is not registered
        """
        checker_class = cls.get(name)
        if not checker_class:
            available = ", ".join(cls._checkers.keys()) or "none"
            raise ValueError(
                f"Unknown checker: '{name}'. Available checkers: {available}"
            )

        return checker_class(**kwargs)

    @classmethod
    def list_checkers(cls) -> List[str]:
        """List all registered checker names."""
        return list(cls._checkers.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._checkers

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registrations.

        Mainly useful for testing.
        """
        cls._checkers.clear()


def register_checker(name: str) -> Callable[[Type[Checker]], Type[Checker]]:
    """
    Decorator to auto-register a checker class.

    Usage:
        @register_checker("ai")
        class AIChecker(Checker):
            ...
    """

    def decorator(cls: Type[Checker]) -> Type[Checker]:
        CheckerRegistry.register(name, cls)
        return cls

    return decorator
