# Public API
from .aspect import AspectDefinition, AspectType
from .aspect_extractor import AspectExtractor
from .bean_assembler import BeanAssembler
from .bean_id_generator import BeanIdGenerator
from .definition import BeanDefinition
from .definition_source import DefinitionSource, DefinitionSourceChain
from .document_resolver import DocumentResolver, ResolvedDocuments
from .driver import XmlBeanDriver
from .exceptions import (
    BeanNotFoundError,
    ConfigError,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigParseError,
    CyclicImportError,
    InvalidAspectTypeError,
    InvalidScopeError,
    MissingAttributeError,
    XmlInjectionError,
)
from .options import XmlDriverOptions
from .scope import BeanScope
from .value import ConstructorArgumentDefinition, PropertyDefinition, ValueKind
from .value_extractor import ValueExtractor

__all__ = [
    "XmlBeanDriver",
    "XmlDriverOptions",
    "DefinitionSource",
    "DefinitionSourceChain",
    # Model
    "BeanDefinition",
    "BeanScope",
    "PropertyDefinition",
    "ConstructorArgumentDefinition",
    "ValueKind",
    "AspectDefinition",
    "AspectType",
    # Loading
    "DocumentResolver",
    "ResolvedDocuments",
    "ValueExtractor",
    "AspectExtractor",
    "BeanAssembler",
    "BeanIdGenerator",
    # Exceptions
    "XmlInjectionError",
    "ConfigError",
    "ConfigLoadError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "CyclicImportError",
    "InvalidScopeError",
    "InvalidAspectTypeError",
    "MissingAttributeError",
    "BeanNotFoundError",
]

# _version.py is generated by release builds
try:
    from ._version import __version__
except ImportError:
    # Fallback for development
    __version__ = '0.0.0'
