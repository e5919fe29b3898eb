"""
XmlBeanDriver

This module provides the definition source backed by XML documents.
A container asks the driver for the definition of a bean whenever its own
definition cache misses; the driver loads the documents on first use and
assembles definitions from them.

Example::

    driver = XmlBeanDriver(XmlDriverOptions(filename="config/beans.xml"))
    definition = driver.get_definition("userService")
    print(definition.class_name, definition.scope)

    # Chained with other sources
    chain = DefinitionSourceChain([driver, other_source])
"""

import logging
import os
import threading
from typing import Any, Optional, Union

from .bean_assembler import BeanAssembler
from .bean_id_generator import BeanIdGenerator
from .definition import BeanDefinition
from .definition_source import DefinitionSource
from .document_resolver import DocumentResolver, ResolvedDocuments
from .options import XmlDriverOptions

logger = logging.getLogger(__name__)


class XmlBeanDriver(DefinitionSource):
    """Definition source reading beans from XML documents.

    Documents are resolved once, lazily, and kept for the lifetime of the
    driver; bean definitions are assembled on every request. The driver is
    owned by its caller: create one per root document and hand it to the
    container that needs it.

    Loading and assembling are serialized with a lock, since assembling a
    bean may write synthesized ids into the shared document trees.

    Attributes:
        _options: Driver configuration
        _documents: Resolved documents, None until first use
        _lock: Guards document loading and assembly
    """

    def __init__(self, options: Union[XmlDriverOptions, str, os.PathLike]):
        """Initialize the driver.

        Args:
            options: Driver options, or the path (str or path-like) of the root document

        Example::

            driver = XmlBeanDriver("config/beans.xml")
        """
        if isinstance(options, (str, os.PathLike)):
            options = XmlDriverOptions(filename=os.fspath(options))
        self._options: XmlDriverOptions = options
        self._resolver = DocumentResolver(options.base_path)
        self._assembler = BeanAssembler(BeanIdGenerator(options.id_prefix))
        self._documents: Optional[ResolvedDocuments] = None
        self._lock = threading.RLock()

    @property
    def options(self) -> XmlDriverOptions:
        return self._options

    @property
    def is_loaded(self) -> bool:
        """Check whether the documents have been resolved."""
        return self._documents is not None

    @property
    def documents(self) -> ResolvedDocuments:
        """The resolved documents, loading them if needed.

        Raises:
            ConfigLoadError: When the documents cannot be loaded
        """
        with self._lock:
            if self._documents is None:
                logger.debug(f"Resolving bean documents from {self._options.filename}")
                self._documents = self._resolver.resolve(self._options.filename)
            return self._documents

    def reset(self) -> None:
        """Drop the resolved documents; the next lookup loads them again.

        The anonymous id counter restarts too, so ids synthesized after a
        reset start again from the first one. Anonymous ids held in
        definitions returned before the reset refer to the discarded
        documents and must be looked up again.
        """
        with self._lock:
            self._documents = None
            self._assembler = BeanAssembler(BeanIdGenerator(self._options.id_prefix))

    def get_definition(self, bean_id: str) -> Optional[BeanDefinition]:
        """Get the definition of a bean.

        Returns:
            The bean definition, or None if no document declares the bean

        Raises:
            ConfigLoadError: When the documents cannot be loaded
            ConfigError: When the bean declaration is invalid
        """
        return self.lookup(None, bean_id)

    def lookup(
        self,
        factory: Any,
        bean_id: str,
        bean: Optional[BeanDefinition] = None,
    ) -> Optional[BeanDefinition]:
        """Fill in the definition of a bean for a bean factory.

        Args:
            factory: The bean factory asking for the definition (unused,
                passed through by containers)
            bean_id: Identifier of the bean
            bean: Definition already known by the factory, if any

        Returns:
            A populated copy of ``bean`` (or a new definition) when the
            documents declare the bean, ``bean`` unchanged otherwise
        """
        with self._lock:
            definition = self._assembler.assemble(bean_id, self.documents, bean)
        if definition is None:
            return bean
        return definition

    def __repr__(self) -> str:
        return f"XmlBeanDriver({self._options.filename!r})"
