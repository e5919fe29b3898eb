"""
BeanScope Enum

Defines the lifecycle policy of declared beans
"""

from enum import Enum

from .exceptions import InvalidScopeError


class BeanScope(Enum):
    """Scope of a bean"""
    SINGLETON = "singleton"
    PROTOTYPE = "prototype"

    @classmethod
    def parse(cls, value: str, bean_name: str = '') -> 'BeanScope':
        """Map a ``scope`` attribute value to a BeanScope.

        Raises:
            InvalidScopeError: When the value is not a known scope
        """
        for scope in cls:
            if scope.value == value:
                return scope
        raise InvalidScopeError(
            f"Invalid bean scope: '{value}' (bean '{bean_name}').\n"
            f"Expected one of: {', '.join(s.value for s in cls)}"
        )
