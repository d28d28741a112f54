import re
from typing import Any, TypedDict, TypeVar

from onetemplate.errors import TypeMismatchError

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))

INTEGER_RE = re.compile(r"[-+]?[0-9]+")
UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def resolve_config(config: T, default_config: U):
    _config = default_config.copy()
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config


def to_template_value(key: str, value: Any) -> str:
    """Render a builder value as template text. Only int and str are accepted."""
    # bool is an int subclass but has no template representation
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeMismatchError(
            f"AddPair: unexpected type {type(value).__name__} for key {key}", key=key, value=value
        )
    if isinstance(value, int):
        return str(value)
    return value


def parse_int(key: str, value: str, unsigned: bool = False) -> int:
    pattern = UNSIGNED_RE if unsigned else INTEGER_RE
    if not pattern.fullmatch(value):
        kind = "an unsigned integer" if unsigned else "an integer"
        raise TypeMismatchError(f"value {value!r} of key {key} is not {kind}", key=key, value=value)
    return int(value, 10)
