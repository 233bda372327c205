"""
Redaction of merchant credentials and consumer PII in raw HTTP text.

Each pass is a plain ``str -> str`` function so it can be tested on its own;
`maybe_obfuscate` chains them in a fixed order, each pass working on the
previous pass's output.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from .config import AfterpayConfig, get_default_config
from .debug import dprint
from .errors import AfterpaySDKError

# ------------------------------------------------------------------------------
# Patterns
# ------------------------------------------------------------------------------
# Merchant API credentials. Needs at least 6 token characters to match.
_BASIC_AUTH_RE = re.compile(r"(Authorization: Basic )(.{3})(.*)(\S{3})", re.I)

# Merchant ID embedded in the SDK User-Agent, e.g. "... Merchant/100101382)"
_USER_AGENT_RE = re.compile(r"(User-Agent:.*Merchant/)([0-9a-zA-Z]+)(.*)", re.I)

PII_KEYS: Tuple[str, ...] = (
    "phoneNumber",
    "givenNames",
    "surname",
    "email",
    "name",
    "line1",
    "line2",
    "area1",
    "area2",
    "region",
    "postcode",
)

# Consumer / contact attributes in compact JSON: "key":"value"
_PII_RE = re.compile(
    r'(")(' + "|".join(re.escape(k) for k in PII_KEYS) + r')(":")([^"]+)(")',
    re.I,
)

_NON_WHITESPACE_RE = re.compile(r"\S")


# ------------------------------------------------------------------------------
# Passes
# ------------------------------------------------------------------------------
def obfuscate_basic_auth(text: str) -> str:
    """'Authorization: Basic abcdefghij' -> 'Authorization: Basic abc****hij'"""
    return _BASIC_AUTH_RE.sub(
        lambda m: m.group(1) + m.group(2) + "*" * len(m.group(3)) + m.group(4),
        text,
    )


def obfuscate_user_agent(text: str) -> str:
    return _USER_AGENT_RE.sub(
        lambda m: m.group(1) + "*" * len(m.group(2)) + m.group(3),
        text,
    )


def obfuscate_pii(text: str) -> str:
    """Mask every non-whitespace character of known PII values."""
    return _PII_RE.sub(
        lambda m: m.group(1) + m.group(2) + m.group(3) + _NON_WHITESPACE_RE.sub("*", m.group(4)) + m.group(5),
        text,
    )


OBFUSCATION_PASSES: Tuple[Callable[[str], str], ...] = (
    obfuscate_basic_auth,
    obfuscate_user_agent,
    obfuscate_pii,
)


def maybe_obfuscate(text: Optional[str], config: Optional[AfterpayConfig] = None) -> Optional[str]:
    """
    Redact `text` for logging unless obfuscation is switched off.

    Parameters
    ----------
    text : Optional[str]
        Raw HTTP text (headers and/or body). None is returned as is.
    config : Optional[AfterpayConfig]
        Config whose `log_obfuscation_enabled` flag decides; the process-wide
        default config is used when omitted. If that default cannot be
        built (e.g. a bad AFTERPAY_API_ENVIRONMENT), text is redacted.
    """
    if text is None:
        return None
    if config is None:
        try:
            config = get_default_config()
        except AfterpaySDKError as e:
            dprint("maybe_obfuscate(): no usable default config, redacting", {"error": str(e)})
    if config is not None and not config.log_obfuscation_enabled:
        return text
    for obfuscate in OBFUSCATION_PASSES:
        text = obfuscate(text)
    return text


__all__ = [
    "PII_KEYS",
    "OBFUSCATION_PASSES",
    "obfuscate_basic_auth",
    "obfuscate_user_agent",
    "obfuscate_pii",
    "maybe_obfuscate",
]
