from __future__ import annotations
import os
import json
import datetime
from typing import Any, Optional

# ------------------------------------------------------------------------------
# Debug flag (env overrideable) + runtime toggles
# ------------------------------------------------------------------------------
_DEBUG_ENABLED = os.getenv("AFTERPAY_DEBUG", "0").lower() not in ("0", "false", "no", "off", "")

def is_enabled() -> bool:
    return _DEBUG_ENABLED

def set_debug(enabled: bool) -> None:
    """Enable/disable debug printing at runtime."""
    global _DEBUG_ENABLED
    _DEBUG_ENABLED = bool(enabled)

MAX_JSON_CHARS = int(os.getenv("AFTERPAY_DEBUG_MAX_JSON", "50000"))  # cap printed JSON length

def _ts() -> str:
    # ISO 8601 UTC timestamp, e.g., 2025-09-13T10:20:30Z
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

# ------------------------------------------------------------------------------
# Printing helpers
# ------------------------------------------------------------------------------
def dprint(*args: Any) -> None:
    if _DEBUG_ENABLED:
        print("[AfterpaySDK]", _ts(), *args, flush=True)

def djson(label: str, data: Any) -> None:
    if _DEBUG_ENABLED:
        try:
            s = json.dumps(data, ensure_ascii=False, indent=2, default=str)
        except Exception:
            s = repr(data)
        if len(s) > MAX_JSON_CHARS:
            s = s[:MAX_JSON_CHARS] + "... (truncated)"
        print("[AfterpaySDK]", _ts(), f"{label}:", s, flush=True)

def dhttp(label: str, message: Any, config: Optional[Any] = None) -> None:
    """
    Print raw HTTP text after redaction.

    `message` is either an HTTPMessage (its own config is used unless one is
    passed) or a raw string. This is the only helper that should ever print
    raw header/body text.
    """
    if not _DEBUG_ENABLED:
        return
    # local import: obfuscation -> config -> errors -> debug
    from .obfuscation import maybe_obfuscate

    if isinstance(message, str) or message is None:
        text = maybe_obfuscate(message, config)
    else:
        text = maybe_obfuscate(message.get_raw(), config or message._config)
    print("[AfterpaySDK]", _ts(), f"{label}:\n{text}", flush=True)


__all__ = [
    "is_enabled",
    "set_debug",
    "dprint",
    "djson",
    "dhttp",
]
