"""
Afterpay-Python SDK: HTTP message core

Framework-agnostic helpers for:
- Merchant configuration (credentials, API environment, log obfuscation)
- Parsing raw HTTP header blocks and JSON bodies
- Redacting credentials and consumer PII before raw HTTP is logged
- Wrapping httpx requests/responses
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------
__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Public API re-exports
# ---------------------------------------------------------------------------
from .config import (
    API_ENVIRONMENTS,
    AfterpayConfig,
    get_default_config,
    set_default_config,
    reset_default_config,
)
from .errors import (
    AfterpaySDKError,
    AfterpayConfigError,
    InvalidArgumentError,
    ParsingError,
)
from .message import HTTPMessage, NetworkFailure, UNKNOWN_HTTP_VERSION
from .obfuscation import (
    maybe_obfuscate,
    obfuscate_basic_auth,
    obfuscate_user_agent,
    obfuscate_pii,
)
from .models import ErrorResponse, Consumer, Contact
from .adapters import message_from_request, message_from_response
from .debug import dprint, djson, dhttp, is_enabled as debug_enabled, set_debug as set_debug_enabled

# ---------------------------------------------------------------------------
# Debug print on import (only if AFTERPAY_DEBUG is truthy)
# ---------------------------------------------------------------------------
dprint("SDK import", {"version": __version__})

__all__ = (
    "__version__",
    # config
    "API_ENVIRONMENTS",
    "AfterpayConfig",
    "get_default_config",
    "set_default_config",
    "reset_default_config",
    # errors
    "AfterpaySDKError",
    "AfterpayConfigError",
    "InvalidArgumentError",
    "ParsingError",
    # messages
    "HTTPMessage",
    "NetworkFailure",
    "UNKNOWN_HTTP_VERSION",
    "message_from_request",
    "message_from_response",
    # obfuscation
    "maybe_obfuscate",
    "obfuscate_basic_auth",
    "obfuscate_user_agent",
    "obfuscate_pii",
    # models
    "ErrorResponse",
    "Consumer",
    "Contact",
    # debug controls
    "dprint",
    "djson",
    "dhttp",
    "debug_enabled",
    "set_debug_enabled",
)
