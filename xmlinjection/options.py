"""
XmlDriverOptions

Configuration of an XmlBeanDriver.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .exceptions import ConfigError

DEFAULT_ID_PREFIX = 'Bean#'


@dataclass(frozen=True)
class XmlDriverOptions:
    """Options for loading bean definitions from XML documents.

    Attributes:
        filename: Path of the root document
        base_path: Directory relative ``<import resource="..."/>`` paths are
            resolved against. When None, each import is resolved against the
            directory of the document declaring it.
        id_prefix: Prefix of the identifiers synthesized for anonymous beans

    Example::

        options = XmlDriverOptions(filename="config/beans.xml")
        driver = XmlBeanDriver(options)
    """

    filename: str
    base_path: Optional[str] = None
    id_prefix: str = DEFAULT_ID_PREFIX

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'XmlDriverOptions':
        """Build options from a plain dictionary.

        Accepts the ``filename``, ``base_path`` and ``id_prefix`` keys;
        other keys are ignored.

        Raises:
            ConfigError: When ``filename`` is missing or empty
        """
        filename = options.get('filename')
        if not filename:
            raise ConfigError(
                "Missing 'filename' option: the XML driver needs the path "
                "of the root bean document."
            )
        return cls(
            filename=filename,
            base_path=options.get('base_path'),
            id_prefix=options.get('id_prefix') or DEFAULT_ID_PREFIX,
        )
