"""
Build HTTPMessage objects from httpx requests/responses.

The transport layer owns the network; these helpers only read objects it
already has in hand, rebuild the raw header block and feed the message
setters in the order body parsing needs (content type, headers, body).
"""

from __future__ import annotations

from typing import Optional

import httpx

from .config import AfterpayConfig
from .debug import dprint
from .message import HTTPMessage


def _header_lines(headers: httpx.Headers) -> str:
    # .raw keeps the original header-name casing
    enc = headers.encoding
    return "".join(f"{k.decode(enc)}: {v.decode(enc)}\r\n" for k, v in headers.raw)


def raw_headers_from_response(response: httpx.Response) -> str:
    """'HTTP/1.1 200 OK\\r\\nName: value\\r\\n...\\r\\n'"""
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()
    return f"{status_line}\r\n{_header_lines(response.headers)}\r\n"


def raw_headers_from_request(request: httpx.Request) -> str:
    """'POST /v2/checkouts HTTP/1.1\\r\\nName: value\\r\\n...\\r\\n'"""
    target = request.url.raw_path.decode("ascii", errors="replace")
    return f"{request.method} {target} HTTP/1.1\r\n{_header_lines(request.headers)}\r\n"


def message_from_response(response: httpx.Response, config: Optional[AfterpayConfig] = None) -> HTTPMessage:
    """The response must already be read (non-streaming, or `.read()` called)."""
    msg = HTTPMessage(config)
    msg.set_content_type(response.headers.get("content-type"))
    msg.set_raw_headers(raw_headers_from_response(response))
    msg.set_raw_body(response.text)
    dprint("adapters.message_from_response()", {"status": response.status_code, "message": repr(msg)})
    return msg


def message_from_request(request: httpx.Request, config: Optional[AfterpayConfig] = None) -> HTTPMessage:
    msg = HTTPMessage(config)
    msg.set_content_type(request.headers.get("content-type"))
    msg.set_raw_headers(raw_headers_from_request(request))
    msg.set_raw_body(request.content.decode("utf-8", errors="replace"))
    dprint("adapters.message_from_request()", {"method": request.method, "message": repr(msg)})
    return msg


__all__ = [
    "raw_headers_from_response",
    "raw_headers_from_request",
    "message_from_response",
    "message_from_request",
]
