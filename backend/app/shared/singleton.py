"""Process-wide instances keyed by class."""
from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar('T')

_instances: Dict[Type, Any] = {}


def get_singleton(cls: Type[T], *args, **kwargs) -> T:
    """Get or create the shared instance of cls; arguments only apply on creation."""
    if cls not in _instances:
        _instances[cls] = cls(*args, **kwargs)
    return _instances[cls]


def pop_singleton(cls: Type[T]) -> Optional[T]:
    """Forget the shared instance of cls and hand it back for cleanup."""
    return _instances.pop(cls, None)
