from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .config import AfterpayConfig, get_default_config
from .debug import dprint, djson
from .errors import InvalidArgumentError, ParsingError, type_name
from .obfuscation import maybe_obfuscate


# -------------------- constants --------------------

UNKNOWN_HTTP_VERSION = "Unknown"

_HTTP_VERSION_RE = re.compile(r"\bHTTP/([0-9.]+)\b", re.I)
_JSON_CONTENT_TYPE_RE = re.compile(r"^application/json", re.I)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class NetworkFailure:
    """
    Marker a transport passes instead of header text when the request never
    produced a response (DNS failure, timeout, reset, ...).
    """
    reason: Optional[str] = None


# False / None are accepted from legacy transports that signal failure that way.
HeaderInput = Union[str, NetworkFailure, None]


def _is_failure_sentinel(value: Any) -> bool:
    return value is None or value is False or isinstance(value, NetworkFailure)


class HTTPMessage:
    """
    One HTTP request or response as seen by the SDK.

    Populate in this order, since body parsing depends on the content type:

        msg = HTTPMessage(config)
        msg.set_content_type(ct).set_raw_headers(raw_headers).set_raw_body(raw_body)

    Setting the raw headers re-derives `http_version` and `parsed_headers`;
    setting the raw body re-derives `parsed_body`. Setters validate before
    assigning, so a rejected value leaves the message unchanged.
    """

    def __init__(self, config: Optional[AfterpayConfig] = None):
        self._config = config
        self._http_version: str = UNKNOWN_HTTP_VERSION
        self._content_type: Optional[str] = None
        self._raw_headers: Optional[str] = None
        self._parsed_headers: Dict[str, str] = {}
        self._raw_body: Optional[str] = None
        self._parsed_body: Any = None

    # ------------ read-only views ------------
    @property
    def config(self) -> AfterpayConfig:
        """Explicit config if one was given, else the process-wide default."""
        return self._config if self._config is not None else get_default_config()

    @property
    def http_version(self) -> str:
        return self._http_version

    @property
    def content_type(self) -> Optional[str]:
        return self._content_type

    @property
    def content_type_simplified(self) -> Optional[str]:
        """
        Content-Type minus any parameters.

        For example:
            - "text/html; charset=UTF-8"         --> "text/html"
            - "text/plain;charset=iso-8859-1"    --> "text/plain"
        """
        if self._content_type is None:
            return None
        return self._content_type.split(";", 1)[0]

    @property
    def raw_headers(self) -> Optional[str]:
        return self._raw_headers

    @property
    def parsed_headers(self) -> Dict[str, str]:
        return self._parsed_headers

    @property
    def raw_body(self) -> Optional[str]:
        return self._raw_body

    @property
    def parsed_body(self) -> Any:
        return self._parsed_body

    # ------------ setters ------------
    def set_content_type(self, content_type: Union[str, NetworkFailure, None]) -> "HTTPMessage":
        """
        Set the Content-Type value.

        The API sometimes omits the Content-Type header; pass None (or a
        failure sentinel) and the body parser will try JSON anyway.
        """
        if _is_failure_sentinel(content_type):
            content_type = None
        elif not isinstance(content_type, str):
            raise InvalidArgumentError(f"Expected string; {type_name(content_type)} given")

        self._content_type = content_type
        dprint("HTTPMessage.set_content_type()", {"content_type": content_type})
        return self

    def set_raw_headers(self, raw_headers: HeaderInput) -> "HTTPMessage":
        """
        Store and parse the raw header block.

        A failure sentinel (`NetworkFailure`, or False/None from older
        transports) means "no headers": nothing to parse, no error.
        """
        if _is_failure_sentinel(raw_headers):
            # Probably a network error.
            dprint("HTTPMessage.set_raw_headers(): no headers", {"sentinel": repr(raw_headers)})
            raw_headers = None
        elif not isinstance(raw_headers, str):
            raise InvalidArgumentError(f"Expected string; {type_name(raw_headers)} given")

        self._raw_headers = raw_headers
        self.parse_raw_headers()
        return self

    def set_raw_body(self, raw_body: str) -> "HTTPMessage":
        """
        Store and parse the raw body.

        Raises
        ------
        InvalidArgumentError
            If `raw_body` is not a string.
        ParsingError
            If the content type declares JSON but the body does not decode.
        """
        if not isinstance(raw_body, str):
            raise InvalidArgumentError(f"Expected string; {type_name(raw_body)} given")

        parsed = self._decode_body(raw_body)
        self._raw_body = raw_body
        self._parsed_body = parsed
        return self

    # ------------ parsing ------------
    def is_json(self) -> bool:
        return bool(self._content_type) and _JSON_CONTENT_TYPE_RE.match(self._content_type) is not None

    def parse_raw_headers(self) -> Dict[str, str]:
        lines = (self._raw_headers or "").split("\n")

        m = _HTTP_VERSION_RE.search(lines[0])
        self._http_version = m.group(1) if m else UNKNOWN_HTTP_VERSION

        parsed: Dict[str, str] = {}
        for line in lines[1:]:
            key, sep, value = line.partition(":")
            if not sep:
                continue
            parsed[key.strip().lower()] = value.strip()
        self._parsed_headers = parsed

        djson("HTTPMessage.parse_raw_headers()", {"http_version": self._http_version, "names": list(parsed)})
        return parsed

    def _decode_body(self, raw_body: Optional[str]) -> Any:
        """
        Decode a body when it is (or might be) JSON, without touching state.

        - empty body                       -> None
        - declared JSON, decode fails      -> ParsingError
        - no content type, decode fails    -> None
        - any other content type           -> None
        """
        if not raw_body:
            return None

        declared_json = self.is_json()
        if not declared_json and self._content_type is not None:
            return None

        try:
            parsed = json.loads(raw_body)
        except json.JSONDecodeError as e:
            if declared_json:
                raise ParsingError(e.msg, e.pos, content_type=self._content_type) from e
            dprint("HTTPMessage._decode_body(): body is not JSON", {"error": e.msg})
            return None

        if declared_json and parsed is None:
            raise ParsingError("JSON document decoded to null", 0, content_type=self._content_type)

        dprint("HTTPMessage._decode_body()", {"type": type(parsed).__name__})
        return parsed

    def parse_raw_body(self) -> Any:
        """Re-derive `parsed_body` from `raw_body`; unchanged if decoding raises."""
        self._parsed_body = self._decode_body(self._raw_body)
        return self._parsed_body

    def parse_body_as(self, model: Type[M]) -> M:
        """Validate the parsed body into a pydantic model (see `afterpay.models`)."""
        try:
            return model.model_validate(self._parsed_body)
        except ValidationError as e:
            # input values are left out: they are body content (PII)
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']} [{err['type']}]"
                for err in e.errors(include_input=False, include_url=False)
            )
            raise ParsingError(
                f"{e.error_count()} validation error(s) for {model.__name__}: {details}",
                e.error_count(),
                content_type=self._content_type,
            ) from None

    # ------------ accessors ------------
    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._parsed_headers.get(name.strip().lower(), default)

    def get_raw(self) -> str:
        """Raw headers followed by the raw body, for logging."""
        s = self._raw_headers or ""
        if self._raw_body is not None:
            s += self._raw_body
        return s

    def get_obfuscated_raw(self) -> str:
        return maybe_obfuscate(self.get_raw(), self._config)

    def __repr__(self) -> str:
        return (
            f"HTTPMessage(http_version={self._http_version!r}, content_type={self._content_type!r}, "
            f"headers={len(self._parsed_headers)})"
        )


__all__ = [
    "UNKNOWN_HTTP_VERSION",
    "NetworkFailure",
    "HTTPMessage",
]
