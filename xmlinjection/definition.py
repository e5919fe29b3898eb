"""
Definition

Data class representing one declared bean
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .aspect import AspectDefinition
from .scope import BeanScope
from .value import ConstructorArgumentDefinition, PropertyDefinition


@dataclass
class BeanDefinition:
    """Bean definition"""
    name: str
    class_name: str = ''
    scope: BeanScope = BeanScope.SINGLETON
    factory_method: Optional[str] = None
    factory_bean: Optional[str] = None  # Bean producing this one through factory_method
    init_method: Optional[str] = None
    destroy_method: Optional[str] = None
    depends_on: List[str] = field(default_factory=list)
    properties: List[PropertyDefinition] = field(default_factory=list)
    arguments: List[ConstructorArgumentDefinition] = field(default_factory=list)  # Positional
    aspects: List[AspectDefinition] = field(default_factory=list)

    def is_singleton(self) -> bool:
        return self.scope == BeanScope.SINGLETON

    def is_prototype(self) -> bool:
        return self.scope == BeanScope.PROTOTYPE

    def has_aspects(self) -> bool:
        return bool(self.aspects)
