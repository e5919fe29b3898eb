"""
BeanAssembler

This module builds a complete BeanDefinition from the ``<bean>`` declaration
found in a set of resolved documents. It reads the bean attributes and
delegates every ``<property>``, ``<constructor-arg>`` and ``<aspect>`` child
to ValueExtractor and AspectExtractor.
"""

import dataclasses
import logging
from typing import Optional
from xml.etree.ElementTree import Element

from .aspect_extractor import AspectExtractor
from .bean_id_generator import BeanIdGenerator
from .definition import BeanDefinition
from .document_resolver import ResolvedDocuments, declares, find_bean
from .exceptions import MissingAttributeError
from .scope import BeanScope
from .value_extractor import ValueExtractor

logger = logging.getLogger(__name__)


class BeanAssembler:
    """Assembles bean definitions from resolved documents.

    Attributes:
        _ids: Generator shared by every assembly, so anonymous beans
            never receive the same identifier twice
        _aspects: Extractor for ``<aspect>`` children

    Example::

        documents = DocumentResolver().resolve("beans.xml")
        assembler = BeanAssembler(BeanIdGenerator())
        definition = assembler.assemble("userService", documents)
    """

    def __init__(self, ids: BeanIdGenerator):
        self._ids = ids
        self._aspects = AspectExtractor()

    def assemble(
        self,
        bean_id: str,
        documents: ResolvedDocuments,
        bean: Optional[BeanDefinition] = None,
    ) -> Optional[BeanDefinition]:
        """Assemble the definition of ``bean_id``.

        Documents are searched in resolution order and the first
        declaration found is used.

        Args:
            bean_id: Identifier of the bean to assemble
            documents: Documents returned by DocumentResolver.resolve()
            bean: Optional pre-seeded definition. It is not modified; the
                populated copy keeps its properties, arguments and aspects
                when the declaration has none.

        Returns:
            The populated definition, or None when no document declares the bean

        Raises:
            InvalidScopeError: When ``scope`` is missing or unknown
            InvalidAspectTypeError: When an aspect ``type`` is unknown
            MissingAttributeError: When ``class`` or an aspect attribute is missing
        """
        found = find_bean(documents, bean_id)
        if found is None:
            return None

        document, node = found
        logger.debug(f"Found {bean_id} in {document}")

        if bean is None:
            bean = BeanDefinition(name=bean_id)
        return self._populate(bean_id, node, documents, bean)

    def _populate(
        self,
        bean_id: str,
        node: Element,
        documents: ResolvedDocuments,
        bean: BeanDefinition,
    ) -> BeanDefinition:
        class_name = node.get('class')
        if not class_name:
            raise MissingAttributeError(
                f"Bean '{bean_id}' has no 'class' attribute"
            )

        changes = {
            'name': bean_id,
            'class_name': class_name,
            'scope': BeanScope.parse(node.get('scope', ''), bean_id),
        }
        for attribute, field_name in (
            ('factory-method', 'factory_method'),
            ('factory-bean', 'factory_bean'),
            ('init-method', 'init_method'),
            ('destroy-method', 'destroy_method'),
        ):
            if attribute in node.attrib:
                changes[field_name] = node.get(attribute)

        if 'depends-on' in node.attrib:
            changes['depends_on'] = [
                name.strip() for name in node.get('depends-on').split(',') if name.strip()
            ]

        values = ValueExtractor(self._ids, lambda name: declares(documents, name))
        properties = [values.extract_property(child) for child in node.findall('property')]
        aspects = [self._aspects.extract(child, bean_id) for child in node.findall('aspect')]
        arguments = [values.extract_argument(child) for child in node.findall('constructor-arg')]

        if properties:
            changes['properties'] = properties
        if aspects:
            changes['aspects'] = aspects
        if arguments:
            changes['arguments'] = arguments

        return dataclasses.replace(bean, **changes)
