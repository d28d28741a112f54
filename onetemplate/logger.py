from typing import NotRequired, TypedDict
import logging
import sys
from onetemplate.utils import resolve_config

ROOT_LOGGER_NAME = "onetemplate"


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": ROOT_LOGGER_NAME,
    "is_enabled": True,
    "level": logging.INFO,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class ComponentLogger(logging.LoggerAdapter):
    """One component's view of a shared named logger.

    The enabled flag and the minimum level belong to the view, so a quiet lexer
    or controller never silences another instance logging under the same name.
    """

    def __init__(self, logger: logging.Logger, is_enabled: bool, min_level: int):
        super().__init__(logger, {})
        self.is_enabled = is_enabled
        self.min_level = min_level

    def isEnabledFor(self, level: int) -> bool:
        return self.is_enabled and level >= self.min_level and self.logger.isEnabledFor(level)


class Logger:
    """Named logger of one component (lexer, parser, client, controller).

    Logging goes to stderr, standard output is left to the wire text printed by
    the command line tool.
    """

    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        base = logging.getLogger(self.config["name"])
        self.set_configuration(base)
        self.logger = ComponentLogger(base, self.config["is_enabled"], self.config["level"])

    def set_configuration(self, base: logging.Logger):
        # loggers are process-wide, only the first Logger for a name configures it
        if base.handlers:
            return
        base.setLevel(logging.DEBUG)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(self.config["format"]))
        base.addHandler(handler)


def get_logger(name: str, is_enabled: bool = True) -> ComponentLogger:
    return Logger(config={"name": name, "is_enabled": is_enabled}).logger
