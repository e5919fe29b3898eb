"""
Value Definitions

Data classes describing the values assigned to bean properties
and constructor arguments
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """How a value is obtained by the container"""
    BEAN_REF = "BEAN_REF"  # Another bean, by identifier
    SIMPLE = "SIMPLE"  # Literal str, bool or None
    ARRAY = "ARRAY"  # Ordered mapping of nested definitions
    CODE = "CODE"  # Expression evaluated by the container


@dataclass
class ConstructorArgumentDefinition:
    """Positional constructor argument definition"""
    kind: ValueKind
    value: Any = None  # Payload, see ValueKind

    def is_bean(self) -> bool:
        return self.kind == ValueKind.BEAN_REF

    def is_array(self) -> bool:
        return self.kind == ValueKind.ARRAY

    def is_code(self) -> bool:
        return self.kind == ValueKind.CODE


@dataclass
class PropertyDefinition(ConstructorArgumentDefinition):
    """Named property definition"""
    name: str = ''
