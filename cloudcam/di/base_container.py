# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


class BaseContainer:
    """
    Minimal dependency injection container.

    Singletons are stored instances; factories build a new instance on
    every get(). Keys are the classes callers ask for.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Type[Any], Any] = {}
        self._factories: Dict[Type[Any], Callable[[], Any]] = {}

    def register_singleton(self, interface: Type[T], instance: T) -> None:
        """Register an already-built instance shared by every caller."""
        self._singletons[interface] = instance

    def register_factory(self, interface: Type[T], factory: Callable[[], T]) -> None:
        """Register a factory called on each get()."""
        self._factories[interface] = factory

    def get(self, interface: Type[T]) -> T:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered for the interface
        """
        if interface in self._singletons:
            return self._singletons[interface]
        if interface in self._factories:
            return self._factories[interface]()
        raise ValueError(f"No registration for {interface.__name__}")
