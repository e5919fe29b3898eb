"""
ValueExtractor

This module turns a value node (``<property>``, ``<constructor-arg>`` or an
array ``<entry>``) into a value definition. The value kind is chosen by the
first marker child found in a fixed priority order:

1. ``<ref bean="..."/>``    -> BEAN_REF
2. ``<null/>``              -> SIMPLE None
3. ``<false/>``             -> SIMPLE False
4. ``<true/>``              -> SIMPLE True
5. ``<bean .../>`` (inline) -> BEAN_REF to the inline bean
6. ``<array>``              -> ARRAY of nested definitions
7. ``<eval>``               -> CODE
8. anything else            -> SIMPLE text

Markers of lower priority present in the same node are ignored.

The text of ``<eval>`` and ``<value>`` markers is kept verbatim; text written
directly inside the value node is stripped of surrounding whitespace.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar
from xml.etree.ElementTree import Element

from .bean_id_generator import BeanIdGenerator
from .value import ConstructorArgumentDefinition, PropertyDefinition, ValueKind

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=ConstructorArgumentDefinition)

# Builds the definition object for a node once its kind and payload are known
DefinitionMaker = Callable[[Element, ValueKind, Any], T]

# Marker handler: (marker element, definition maker) -> (kind, payload)
MarkerHandler = Callable[[Element, DefinitionMaker], Tuple[ValueKind, Any]]


class ValueExtractor:
    """Extracts property and constructor argument definitions from XML nodes.

    Properties, constructor arguments and array entries all go through the
    same dispatch table, so they always agree on how a node is interpreted.

    Attributes:
        _ids: Generator used for anonymous inline beans
        _is_taken: Optional check for identifiers already declared
        _handlers: Ordered (marker tag, handler) pairs, first match wins
    """

    def __init__(
        self,
        ids: BeanIdGenerator,
        is_taken: Optional[Callable[[str], bool]] = None,
    ):
        self._ids = ids
        self._is_taken = is_taken
        self._handlers: List[Tuple[str, MarkerHandler]] = [
            ('ref', self._bean_reference),
            ('null', lambda marker, make: (ValueKind.SIMPLE, None)),
            ('false', lambda marker, make: (ValueKind.SIMPLE, False)),
            ('true', lambda marker, make: (ValueKind.SIMPLE, True)),
            ('bean', self._inline_bean),
            ('array', self._array),
            ('eval', self._code),
        ]

    def extract_property(self, node: Element) -> PropertyDefinition:
        """Extract a property definition.

        Array entries of the property become PropertyDefinitions named
        after their entry key.
        """
        return self._extract(node, _make_property)

    def extract_argument(self, node: Element) -> ConstructorArgumentDefinition:
        """Extract a constructor argument definition."""
        return self._extract(node, _make_argument)

    def _extract(self, node: Element, make: DefinitionMaker) -> T:
        kind, value = self._select(node, make)
        return make(node, kind, value)

    def _select(self, node: Element, make: DefinitionMaker) -> Tuple[ValueKind, Any]:
        for tag, handler in self._handlers:
            marker = node.find(tag)
            if marker is not None:
                return handler(marker, make)
        return ValueKind.SIMPLE, _plain_text(node)

    @staticmethod
    def _bean_reference(marker: Element, make: DefinitionMaker) -> Tuple[ValueKind, Any]:
        return ValueKind.BEAN_REF, marker.get('bean', '')

    def _inline_bean(self, marker: Element, make: DefinitionMaker) -> Tuple[ValueKind, Any]:
        bean_id = marker.get('id') or marker.get('name')
        if not bean_id:
            bean_id = self._ids.next_id(self._is_taken)
            logger.debug(f"Named anonymous bean {bean_id}")
        if not marker.get('id'):
            # Lets a later lookup by this id find the inline declaration
            marker.set('id', bean_id)
        return ValueKind.BEAN_REF, bean_id

    def _array(self, marker: Element, make: DefinitionMaker) -> Tuple[ValueKind, Any]:
        entries = {}
        for entry in marker.findall('entry'):
            entries[entry.get('key', '')] = self._extract(entry, make)
        return ValueKind.ARRAY, entries

    @staticmethod
    def _code(marker: Element, make: DefinitionMaker) -> Tuple[ValueKind, Any]:
        return ValueKind.CODE, ''.join(marker.itertext())


def _plain_text(node: Element) -> str:
    value = node.find('value')
    if value is not None:
        return ''.join(value.itertext())
    return (node.text or '').strip()


def _make_property(node: Element, kind: ValueKind, value: Any) -> PropertyDefinition:
    name = node.get('name')
    if name is None:
        name = node.get('key', '')
    return PropertyDefinition(kind=kind, value=value, name=name)


def _make_argument(node: Element, kind: ValueKind, value: Any) -> ConstructorArgumentDefinition:
    return ConstructorArgumentDefinition(kind=kind, value=value)
