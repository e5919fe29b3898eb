"""
Definition Source Module

This module provides the DefinitionSource abstract interface and the
DefinitionSourceChain that lets a container consult several sources in
order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .definition import BeanDefinition
from .exceptions import BeanNotFoundError


class DefinitionSource(ABC):
    """Abstract interface for anything that can describe beans by id.

    A source answers None for beans it does not know about, so that
    callers can fall back to the next source.

    Example::

        class InMemorySource(DefinitionSource):
            def __init__(self, definitions):
                self._definitions = definitions

            def get_definition(self, bean_id):
                return self._definitions.get(bean_id)
    """

    @abstractmethod
    def get_definition(self, bean_id: str) -> Optional[BeanDefinition]:
        """Get the definition of a bean.

        Args:
            bean_id: Identifier of the bean

        Returns:
            The bean definition, or None if this source does not declare it

        Raises:
            ConfigError: If the source declares the bean but its
                configuration is invalid
        """
        pass


class DefinitionSourceChain(DefinitionSource):
    """Consults several definition sources in order, first match wins.

    Unlike a single source, the chain treats a bean that no source
    declares as an error.

    Example::

        chain = DefinitionSourceChain([XmlBeanDriver("beans.xml"), fallback])
        definition = chain.get_definition("userService")
    """

    def __init__(self, sources: Optional[List[DefinitionSource]] = None):
        self._sources: List[DefinitionSource] = list(sources or [])

    def add_source(self, source: DefinitionSource) -> None:
        """Append a source, consulted after the existing ones."""
        self._sources.append(source)

    @property
    def sources(self) -> List[DefinitionSource]:
        return list(self._sources)

    def get_definition(self, bean_id: str) -> BeanDefinition:
        """Get the definition from the first source declaring the bean.

        Raises:
            BeanNotFoundError: When no source declares the bean
        """
        for source in self._sources:
            definition = source.get_definition(bean_id)
            if definition is not None:
                return definition

        consulted = ", ".join(repr(source) for source in self._sources) or "None"
        raise BeanNotFoundError(
            f"Bean '{bean_id}' is not declared.\n"
            f"Sources consulted: {consulted}"
        )
