"""OpenNebula template documents: build, serialize, parse, and send them."""

from .errors import (
    AlreadySetError,
    MultipleMatchesError,
    NotFoundError,
    ParseError,
    TemplateError,
    TransportFault,
    TypeMismatchError,
)
from .nodes import Pair, Vector, TemplateElement
from .document import DynamicTemplate, NAME, DESCRIPTION, TYPE
from .formatter import TemplateFormatter, XmlTemplateFormatter
from .schema import KeyRule, TemplateSchema
from .lexer import TemplateLexer, LexerConfig, Token, TokenType
from .parser import TemplateParser, ParserConfig, parse_elements
from .builder import TemplateBuilder, build_template
from .filters import (
    DocumentFilter,
    ExtendedFilter,
    Filter,
    LockLevel,
    PoolWho,
    UpdateType,
    VMExtendedFilter,
    VMFilter,
    VMState,
)
from .client import ClientConfig, Response, Transport, XmlRpcTransport
from .controllers import Controller

__all__ = [
    "AlreadySetError",
    "MultipleMatchesError",
    "NotFoundError",
    "ParseError",
    "TemplateError",
    "TransportFault",
    "TypeMismatchError",
    "Pair",
    "Vector",
    "TemplateElement",
    "DynamicTemplate",
    "NAME",
    "DESCRIPTION",
    "TYPE",
    "TemplateFormatter",
    "XmlTemplateFormatter",
    "KeyRule",
    "TemplateSchema",
    "TemplateLexer",
    "LexerConfig",
    "Token",
    "TokenType",
    "TemplateParser",
    "ParserConfig",
    "parse_elements",
    "TemplateBuilder",
    "build_template",
    "DocumentFilter",
    "ExtendedFilter",
    "Filter",
    "LockLevel",
    "PoolWho",
    "UpdateType",
    "VMExtendedFilter",
    "VMFilter",
    "VMState",
    "ClientConfig",
    "Response",
    "Transport",
    "XmlRpcTransport",
    "Controller",
]
