"""
Aspect

Definitions of cross-cutting concerns bound to pointcut expressions
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidAspectTypeError


class AspectType(Enum):
    """What an aspect intercepts"""
    METHOD = "method"
    EXCEPTION = "exception"

    @classmethod
    def parse(cls, value: str) -> 'AspectType':
        """Map an aspect ``type`` attribute value to an AspectType.

        Raises:
            InvalidAspectTypeError: When the value is not a known type
        """
        for aspect_type in cls:
            if aspect_type.value == value:
                return aspect_type
        raise InvalidAspectTypeError(
            f"Invalid aspect type: '{value}'.\n"
            f"Expected one of: {', '.join(t.value for t in cls)}"
        )


@dataclass(frozen=True)
class AspectDefinition:
    """Aspect definition"""
    pointcut: str  # Expression selecting the intercepted operations
    aspect_type: AspectType
    bean_name: str  # Bean implementing the cross-cutting behavior
