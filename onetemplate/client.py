"""XML-RPC transport to the OpenNebula frontend."""

from __future__ import annotations

import http.client
import os
import xmlrpc.client
from dataclasses import dataclass
from typing import Any, NotRequired, Optional, Protocol, TypedDict

from onetemplate.errors import TransportFault
from onetemplate.logger import Logger
from onetemplate.utils import parse_int, resolve_config

DEFAULT_ENDPOINT = "http://localhost:2633/RPC2"


class ClientConfig(TypedDict):
    endpoint: NotRequired[str]
    session: NotRequired[str]
    timeout: NotRequired[Optional[float]]
    enable_logger: NotRequired[bool]


class ClientConfigRequired(TypedDict):
    endpoint: str
    session: str
    timeout: Optional[float]
    enable_logger: bool


def default_client_config() -> ClientConfigRequired:
    """Defaults read from ``ONE_XMLRPC`` and ``ONE_AUTH`` (a literal ``user:password``)."""
    return {
        "endpoint": os.environ.get("ONE_XMLRPC", DEFAULT_ENDPOINT),
        "session": os.environ.get("ONE_AUTH", ""),
        "timeout": None,
        "enable_logger": True,
    }


@dataclass(slots=True)
class Response:
    """Body of a successful call: XML text for info calls, an ID for allocations."""

    method: str
    body: Any

    def body_str(self) -> str:
        return str(self.body)

    def body_int(self) -> int:
        if isinstance(self.body, int) and not isinstance(self.body, bool):
            return self.body
        return parse_int(self.method, str(self.body))


class Transport(Protocol):
    def call(self, method: str, *args: Any) -> Response: ...


class TimeoutTransport(xmlrpc.client.Transport):
    def __init__(self, timeout: float, **kwargs):
        super().__init__(**kwargs)
        self.timeout = timeout

    def make_connection(self, host) -> http.client.HTTPConnection:
        connection = super().make_connection(host)
        connection.timeout = self.timeout
        return connection


class SafeTimeoutTransport(xmlrpc.client.SafeTransport):
    def __init__(self, timeout: float, **kwargs):
        super().__init__(**kwargs)
        self.timeout = timeout

    def make_connection(self, host) -> http.client.HTTPConnection:
        connection = super().make_connection(host)
        connection.timeout = self.timeout
        return connection


class XmlRpcTransport:
    """Calls ``one.*`` methods, prepending the session string to the arguments.

    OpenNebula answers every call with ``[success, body, error_code, ...]``, a
    failed call is raised as ``TransportFault``.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = resolve_config(config or {}, default_client_config())
        self.logger = Logger(config={"name": "onetemplate.client", "is_enabled": self.config["enable_logger"]}).logger
        self.server = xmlrpc.client.ServerProxy(self.config["endpoint"], **self._proxy_options())

    def _proxy_options(self) -> dict[str, Any]:
        timeout = self.config["timeout"]
        if timeout is None:
            return {}
        if self.config["endpoint"].startswith("https"):
            return {"transport": SafeTimeoutTransport(timeout)}
        return {"transport": TimeoutTransport(timeout)}

    def call(self, method: str, *args: Any) -> Response:
        self.logger.info(f"Calling {method}")
        self.logger.debug(f"{method} arguments: {args!r}")
        try:
            result = getattr(self.server, method)(self.config["session"], *args)
        except xmlrpc.client.Fault as e:
            self.logger.error(f"{method}: fault {e.faultCode}: {e.faultString}")
            raise TransportFault(method, e.faultString, e.faultCode) from e
        except (xmlrpc.client.ProtocolError, OSError) as e:
            self.logger.error(f"{method}: {e}")
            raise TransportFault(method, str(e)) from e

        if not isinstance(result, (list, tuple)) or len(result) < 2:
            raise TransportFault(method, f"unexpected response {result!r}")
        if not result[0]:
            code = result[2] if len(result) > 2 else None
            self.logger.error(f"{method}: {result[1]}")
            raise TransportFault(method, str(result[1]), code)
        return Response(method=method, body=result[1])


__all__ = [
    "ClientConfig",
    "DEFAULT_ENDPOINT",
    "Response",
    "Transport",
    "XmlRpcTransport",
    "default_client_config",
]
