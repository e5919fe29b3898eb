"""
DocumentResolver

This module loads the root bean document and, recursively, every document
it imports. The result maps each resolved file path to its parsed tree and
is what BeanAssembler searches when looking for a bean declaration.

Example::

    resolver = DocumentResolver()
    documents = resolver.resolve("config/beans.xml")
    for path, tree in documents.items():
        print(path, len(tree.getroot()))
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union
from xml.etree import ElementTree

from .exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    CyclicImportError,
    MissingAttributeError,
)

logger = logging.getLogger(__name__)

# Resolved file path -> parsed document, root document first
ResolvedDocuments = Dict[str, ElementTree.ElementTree]


class DocumentResolver:
    """Loads a bean document together with all the documents it imports.

    Every ``<import resource="..."/>`` element found anywhere in a document
    is followed. Each file is parsed at most once per ``resolve()`` call, so
    importing the same file from two places is harmless. Import cycles are
    detected and reported instead of recursing forever.

    Attributes:
        _base_path: Directory relative imports are resolved against, or None
            to resolve them against the importing document's directory
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None):
        self._base_path: Optional[Path] = Path(base_path) if base_path is not None else None

    def resolve(self, root_path: Union[str, Path]) -> ResolvedDocuments:
        """Load the root document and everything it imports.

        Args:
            root_path: Path of the root document

        Returns:
            Mapping of resolved file path to parsed document, in load
            order (root first, then imports depth-first)

        Raises:
            ConfigNotFoundError: When the root or an imported file does not exist
            ConfigParseError: When a document is not well-formed XML
            CyclicImportError: When documents import each other in a cycle
            MissingAttributeError: When an ``<import>`` has no ``resource``
        """
        documents: ResolvedDocuments = {}
        self._load(Path(root_path), documents, [], None)
        return documents

    def _load(
        self,
        path: Path,
        documents: ResolvedDocuments,
        chain: List[str],
        imported_from: Optional[str],
    ) -> None:
        key = str(path.resolve())

        if key in chain:
            cycle = chain[chain.index(key):] + [key]
            raise CyclicImportError(
                "Cyclic import detected: " + " -> ".join(cycle)
            )

        if key in documents:
            logger.debug(f"Already loaded {key}, skipping")
            return

        if not path.is_file():
            if imported_from is None:
                raise ConfigNotFoundError(f"{path} not found.")
            raise ConfigNotFoundError(
                f"{path} not found (imported from {imported_from})."
            )

        logger.debug(f"Loading {key}")
        tree = self._parse(path)
        documents[key] = tree

        chain.append(key)
        try:
            for imported in tree.getroot().iter('import'):
                resource = imported.get('resource')
                if not resource:
                    raise MissingAttributeError(
                        f"<import> without a 'resource' attribute in {key}"
                    )
                target = self._import_path(resource, path)
                logger.debug(f"Following import {resource} from {key}")
                self._load(target, documents, chain, key)
        finally:
            chain.pop()

    def _import_path(self, resource: str, importing: Path) -> Path:
        target = Path(resource)
        if target.is_absolute():
            return target
        base = self._base_path if self._base_path is not None else importing.parent
        return base / target

    @staticmethod
    def _parse(path: Path) -> ElementTree.ElementTree:
        try:
            return ElementTree.parse(path)
        except ElementTree.ParseError as e:
            errors = _parse_errors(e)
            raise ConfigParseError(
                f"Could not parse: {path}:\n" + "\n".join(errors)
            ) from e


def _parse_errors(error: ElementTree.ParseError) -> List[str]:
    """Collect the diagnostics carried by a parse error, one per line."""
    errors = [line.strip() for line in str(error).splitlines() if line.strip()]
    line, column = getattr(error, 'position', (None, None))
    if line is not None and not any(f"line {line}" in e for e in errors):
        errors.append(f"at line {line}, column {column}")
    return errors


def find_bean(
    documents: ResolvedDocuments, bean_id: str
) -> Optional[Tuple[str, ElementTree.Element]]:
    """Find the first ``<bean>`` declared with the given id.

    Documents are searched in resolution order, and each document is
    searched in full, nested declarations included.

    Returns:
        (document path, bean element), or None when no document declares it
    """
    for name, tree in documents.items():
        for node in tree.getroot().iter('bean'):
            if node.get('id') == bean_id:
                return name, node
    return None


def declares(documents: ResolvedDocuments, bean_id: str) -> bool:
    """Check whether any document declares a bean with the given id.

    Beans declared with only a legacy ``name`` attribute count as declaring
    that name, since it becomes their id once they are extracted.
    """
    for tree in documents.values():
        for node in tree.getroot().iter('bean'):
            if (node.get('id') or node.get('name')) == bean_id:
                return True
    return False
