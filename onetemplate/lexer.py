from typing import Iterator, NotRequired, Optional, TypedDict
from enum import Enum, auto
from dataclasses import dataclass
from lxml import etree
from onetemplate.errors import ParseError
from onetemplate.utils import resolve_config
from onetemplate.logger import Logger


class TokenType(Enum):
    START_TAG = auto()
    CHAR_DATA = auto()
    END_TAG = auto()
    EOF = auto()

    @classmethod
    def get_token_type(cls, type: str):
        for token_type in cls:
            if token_type.name == type:
                return token_type
        raise ValueError(f"Unknown token type: {type}")


@dataclass(slots=True)
class Token:
    token_type: TokenType
    value: Optional[str]
    line: Optional[int] = None


XmlInput = str | bytes | etree._Element


class LexerConfig(TypedDict):
    tokenize: NotRequired[bool]
    enable_logger: NotRequired[bool]
    strip_whitespace: NotRequired[bool]


class LexerConfigRequired(TypedDict):
    tokenize: bool
    enable_logger: bool
    strip_whitespace: bool


DEFAULT_CONFIG: LexerConfigRequired = {
    "tokenize": True,
    "enable_logger": True,
    "strip_whitespace": False,
}


def load_xml(input: XmlInput) -> etree._Element:
    """Return the root element of ``input``, parsing it first when it is text."""
    if isinstance(input, etree._Element):
        return input
    data = input.encode("utf-8") if isinstance(input, str) else input
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    try:
        return etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        line = e.lineno if e.lineno else None
        raise ParseError(f"Malformed XML: {e.msg}", Token(TokenType.EOF, None, line)) from e


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


class TemplateLexer:
    """Flattens the content of a template root element into XML tokens.

    The root element itself is not emitted: the token stream is the sequence of
    start tags, character data and end tags found between its own start and end
    tag, followed by an EOF token.
    """

    def __init__(self, input: XmlInput, config: Optional[LexerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "onetemplate.lexer", "is_enabled": self.config["enable_logger"]}).logger
        self.root = load_xml(input)
        self.tokens: list[Token] = []
        if self.config["tokenize"]:
            self.tokenize()

    @property
    def root_name(self) -> str:
        return local_name(self.root)

    def tokenize(self) -> list[Token]:
        self.logger.info(f"Starting tokenization of <{self.root_name}>")
        self.tokens = list(self._content_tokens(self.root))
        self._add_token(TokenType.EOF, None, self.root.sourceline)
        self.logger.info(f"Tokenization complete, {len(self.tokens)} tokens")
        return self.tokens

    def _add_token(self, token_type: TokenType, value: Optional[str], line: Optional[int]):
        self.logger.debug(f"Adding token {token_type} with value '{value}' at line {line}")
        self.tokens.append(Token(token_type, value, line))

    def _content_tokens(self, element: etree._Element) -> Iterator[Token]:
        has_children = len(element) > 0
        if element.text is not None and self._keep_char_data(element.text, mixed=has_children):
            yield Token(TokenType.CHAR_DATA, element.text, element.sourceline)
        for child in element:
            # comments and processing instructions only contribute their tail
            if isinstance(child.tag, str):
                yield from self._element_tokens(child)
            if child.tail is not None and self._keep_char_data(child.tail, mixed=True):
                yield Token(TokenType.CHAR_DATA, child.tail, child.sourceline)

    def _element_tokens(self, element: etree._Element) -> Iterator[Token]:
        name = local_name(element)
        yield Token(TokenType.START_TAG, name, element.sourceline)
        yield from self._content_tokens(element)
        yield Token(TokenType.END_TAG, name, element.sourceline)

    def _keep_char_data(self, text: str, mixed: bool) -> bool:
        if text == "":
            return False
        # the text of a leaf is a value and is always kept verbatim
        if self.config["strip_whitespace"] and mixed:
            return not text.isspace()
        return True


__all__ = ["TemplateLexer", "Token", "TokenType", "LexerConfig", "XmlInput", "load_xml", "local_name"]
