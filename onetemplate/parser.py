from typing import Any, List, Optional, NotRequired, TypedDict
from enum import Enum, auto
from onetemplate.errors import ParseError
from onetemplate.lexer import LexerConfig, TemplateLexer, Token, TokenType, XmlInput
from onetemplate.nodes import Pair, TemplateElement, Vector
from onetemplate.utils import resolve_config
from onetemplate.logger import Logger


class ParseState(Enum):
    ELEMENT = auto()  # between two top level elements
    OPENED = auto()  # start tag read, content unknown yet
    CHAR_DATA = auto()  # start tag and character data read, pair or vector still undecided
    VECTOR = auto()  # collecting the pairs of a vector


class ParserConfig(TypedDict):
    parse: NotRequired[bool]
    enable_logger: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    parse: bool
    enable_logger: bool


DEFAULT_CONFIG: ParserConfigRequired = {"parse": True, "enable_logger": True}


class TemplateParser:
    """Turns the token stream of a template root into pairs and vectors.

    Whether a tag is a pair or a vector is only known from what follows its start
    tag, so the parser looks at up to two tokens before deciding:

    * ``<K></K>`` and ``<K>text</K>`` are pairs,
    * ``<K><A>..</A>..</K>`` and ``<K>  <A>..</A>..</K>`` are vectors whose pairs
      are the child tags.

    A start tag seen while deciding is left unconsumed, it becomes the first pair
    of the vector.
    """

    def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "onetemplate.parser", "is_enabled": self.config["enable_logger"]}).logger
        self.tokens = tokens
        self.position = 0
        self.state = ParseState.ELEMENT
        self.elements: list[TemplateElement] = []
        if self.config["parse"]:
            self.parse_tokens()

    @classmethod
    def from_xml(
        cls,
        input: XmlInput,
        lexer_config: Optional[LexerConfig] = None,
        parser_config: Optional[ParserConfig] = None,
    ) -> "TemplateParser":
        lexer = TemplateLexer(input, config=lexer_config)
        return cls(lexer.tokens, config=parser_config)

    @property
    def current_token(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return Token(TokenType.EOF, None, self._last_line())

    @property
    def next_token(self) -> Token:
        return self.lookahead()

    def lookahead(self, distance: int = 1) -> Token:
        if 0 <= self.position + distance < len(self.tokens):
            return self.tokens[self.position + distance]
        return Token(TokenType.EOF, None, self._last_line())

    def _last_line(self) -> Optional[int]:
        return self.tokens[-1].line if self.tokens else None

    def advance(self, steps: int = 1) -> None:
        self.position = min(self.position + steps, len(self.tokens))

    def expect(self, expected_type: TokenType | List[TokenType], expected_value: Optional[Any] = None):
        if not isinstance(expected_type, list):
            expected_type = [expected_type]
        if self.current_token.token_type not in expected_type:
            raise ParseError(
                f"Expected token type {expected_type}, but got {self.current_token.token_type}",
                self.current_token,
            )
        elif expected_value and self.current_token.value != expected_value:
            raise ParseError(
                f"Expected token value {expected_value}, but got {self.current_token.value}",
                self.current_token,
            )

    def consume(self, expected_type: TokenType | List[TokenType], expected_value: Optional[Any] = None) -> Token:
        current_token = self.current_token
        self.expect(expected_type=expected_type, expected_value=expected_value)
        self.advance()
        self.logger.debug(f"Consumed token {current_token}")
        return current_token

    def parse_tokens(self) -> list[TemplateElement]:
        self.logger.debug(f"Parsing {len(self.tokens)} tokens")
        start: Optional[Token] = None
        char_data: Optional[Token] = None
        vector: Optional[Vector] = None

        while True:
            token = self.current_token
            token_type = token.token_type
            match self.state:
                case ParseState.ELEMENT:
                    if token_type == TokenType.EOF:
                        break
                    if token_type == TokenType.CHAR_DATA:
                        self._skip_blank(token)
                        continue
                    start = self.consume(TokenType.START_TAG)
                    self.state = ParseState.OPENED

                case ParseState.OPENED:
                    if token_type == TokenType.START_TAG:
                        vector = Vector(key=start.value)
                        self.state = ParseState.VECTOR
                    elif token_type == TokenType.CHAR_DATA:
                        char_data = self.consume(TokenType.CHAR_DATA)
                        self.state = ParseState.CHAR_DATA
                    else:
                        self.consume(TokenType.END_TAG, start.value)
                        self._add_element(Pair(key=start.value, value=""))

                case ParseState.CHAR_DATA:
                    if token_type == TokenType.START_TAG:
                        # the character data only separated the start tag from a nested tag
                        if not char_data.value.isspace():
                            raise ParseError(f"Unexpected character data in vector {start.value}", char_data)
                        vector = Vector(key=start.value)
                        self.state = ParseState.VECTOR
                    else:
                        self.consume(TokenType.END_TAG, start.value)
                        self._add_element(Pair(key=start.value, value=char_data.value))

                case ParseState.VECTOR:
                    if token_type == TokenType.START_TAG:
                        vector.pairs.append(self._parse_vector_pair())
                    elif token_type == TokenType.CHAR_DATA:
                        self._skip_blank(token)
                    else:
                        self.consume(TokenType.END_TAG, start.value)
                        self._add_element(vector)

        self.logger.info(f"Parsed {len(self.elements)} template elements")
        return self.elements

    def _add_element(self, element: TemplateElement) -> None:
        self.elements.append(element)
        self.state = ParseState.ELEMENT

    def _skip_blank(self, token: Token) -> None:
        if not token.value.isspace():
            raise ParseError(f"Unexpected character data {token.value!r}", token)
        self.advance()

    def _parse_vector_pair(self) -> Pair:
        start = self.consume(TokenType.START_TAG)
        value = ""
        if self.current_token.token_type == TokenType.CHAR_DATA:
            value = self.consume(TokenType.CHAR_DATA).value
        if self.current_token.token_type == TokenType.START_TAG:
            raise ParseError(f"Nested element inside vector attribute {start.value}", self.current_token)
        self.consume(TokenType.END_TAG, start.value)
        return Pair(key=start.value, value=value)


def parse_elements(
    input: XmlInput,
    lexer_config: Optional[LexerConfig] = None,
    parser_config: Optional[ParserConfig] = None,
) -> list[TemplateElement]:
    parser_config = {**(parser_config or {}), "parse": True}
    return TemplateParser.from_xml(input, lexer_config=lexer_config, parser_config=parser_config).elements


__all__ = ["TemplateParser", "ParserConfig", "ParseState", "parse_elements"]
