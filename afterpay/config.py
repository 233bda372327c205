from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Optional

# Try to load .env if python-dotenv is available (safe if missing)
try:
    from dotenv import load_dotenv  # type: ignore
    load_dotenv()
except Exception:
    pass

from .debug import dprint
from .errors import AfterpayConfigError, InvalidArgumentError, type_name


# ----------------------------- constants -----------------------------

ApiEnvironment = Literal["sandbox", "production"]

API_ENVIRONMENTS = ("sandbox", "production")


# ----------------------------- helpers -----------------------------

def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    return v not in ("0", "false", "no", "off", "")


def _env_str(name: str) -> Optional[str]:
    v = os.environ.get(name)
    if v is None or not v.strip():
        return None
    return v.strip()


def _mask(value: Optional[str]) -> str:
    """Mask credentials (merchant ID, secret key) for debug printing."""
    if not value:
        return "(empty)"
    # Show only first 2 chars if any
    return value[:2] + "***"


def check_api_environment(value: Any) -> str:
    """
    Validate an API environment name and return it unchanged.

    Accepts "sandbox" or "production" in any letter case; the original
    spelling is preserved (no lower-casing).
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Expected string; {type_name(value)} given")
    if value.lower() not in API_ENVIRONMENTS:
        raise InvalidArgumentError(f"Expected 'sandbox' or 'production'; '{value}' given")
    return value


# ----------------------------- config -----------------------------

@dataclass
class AfterpayConfig:
    """
    Merchant credentials and logging behaviour shared by every HTTPMessage.

    Precedence:
      explicit kwargs > environment (.env) > defaults

    Build one at SDK start-up and pass it around, or register it with
    `set_default_config()` so components created without an explicit config
    pick it up.
    """

    # Credentials
    merchant_id: Optional[str] = None
    secret_key: Optional[str] = None

    # Routing
    country_code: Optional[str] = None
    api_environment: Optional[str] = None

    # Diagnostics
    log_obfuscation_enabled: Optional[bool] = None

    # Internal: where each field was sourced from (arg/env/default) for debugging
    _source: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for name, var in (
            ("merchant_id", "AFTERPAY_MERCHANT_ID"),
            ("secret_key", "AFTERPAY_SECRET_KEY"),
            ("country_code", "AFTERPAY_COUNTRY_CODE"),
            ("api_environment", "AFTERPAY_API_ENVIRONMENT"),
        ):
            if getattr(self, name) is None or getattr(self, name) == "":
                setattr(self, name, _env_str(var))
                self._source[name] = "env"
            else:
                self._source[name] = "arg"

        if self.api_environment is not None:
            check_api_environment(self.api_environment)

        if self.log_obfuscation_enabled is None:
            self.log_obfuscation_enabled = _parse_bool(os.environ.get("AFTERPAY_LOG_OBFUSCATION"), True)
            self._source["log_obfuscation_enabled"] = "env/default"
        else:
            self.log_obfuscation_enabled = bool(self.log_obfuscation_enabled)
            self._source["log_obfuscation_enabled"] = "arg"

        dprint("Loaded config:", {**self.masked(), "source": self._source})

    # -------- setters --------
    def set_merchant_id(self, merchant_id: Optional[str]) -> None:
        self.merchant_id = merchant_id

    def set_secret_key(self, secret_key: Optional[str]) -> None:
        self.secret_key = secret_key

    def set_country_code(self, country_code: Optional[str]) -> None:
        self.country_code = country_code

    def set_api_environment(self, api_environment: Any) -> None:
        """
        Raises
        ------
        InvalidArgumentError
            If the value is not a string, or is not "sandbox"/"production"
            (case-insensitive).
        """
        self.api_environment = check_api_environment(api_environment)
        dprint("set_api_environment()", {"api_environment": self.api_environment})

    def set_log_obfuscation_enabled(self, enabled: bool) -> None:
        self.log_obfuscation_enabled = bool(enabled)
        dprint("set_log_obfuscation_enabled()", {"enabled": self.log_obfuscation_enabled})

    # -------- validation & utils --------
    def validate(self) -> "AfterpayConfig":
        """Validate presence of the merchant credentials."""
        if not self.merchant_id or not self.secret_key:
            dprint(
                "Validation failed: merchant_id/secret_key missing",
                {"merchant_id": _mask(self.merchant_id), "secret_key": _mask(self.secret_key)},
            )
            raise AfterpayConfigError(
                "AFTERPAY_MERCHANT_ID and AFTERPAY_SECRET_KEY are required."
            )
        dprint("Validation OK")
        return self

    def masked(self) -> dict:
        """Return a sanitized dict for logging/diagnostics."""
        return {
            "merchant_id": _mask(self.merchant_id),
            "secret_key": _mask(self.secret_key),
            "country_code": self.country_code,
            "api_environment": self.api_environment,
            "log_obfuscation_enabled": self.log_obfuscation_enabled,
        }

    def copy_with(
        self,
        *,
        merchant_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        country_code: Optional[str] = None,
        api_environment: Optional[str] = None,
        log_obfuscation_enabled: Optional[bool] = None,
    ) -> "AfterpayConfig":
        """Create a modified copy (handy in tests)."""
        return replace(
            self,
            merchant_id=self.merchant_id if merchant_id is None else merchant_id,
            secret_key=self.secret_key if secret_key is None else secret_key,
            country_code=self.country_code if country_code is None else country_code,
            api_environment=self.api_environment if api_environment is None else api_environment,
            log_obfuscation_enabled=(
                self.log_obfuscation_enabled if log_obfuscation_enabled is None else bool(log_obfuscation_enabled)
            ),
        )

    # -------- alt constructors --------
    @classmethod
    def from_env(cls) -> "AfterpayConfig":
        """Build config strictly from environment (.env considered if loaded)."""
        return cls().validate()


# ----------------------------- process-wide default -----------------------------

_default_config: Optional[AfterpayConfig] = None


def get_default_config() -> AfterpayConfig:
    """Return the registered default config, building one from the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = AfterpayConfig()
    return _default_config


def set_default_config(config: AfterpayConfig) -> AfterpayConfig:
    global _default_config
    if not isinstance(config, AfterpayConfig):
        raise InvalidArgumentError(f"Expected AfterpayConfig; {type_name(config)} given")
    _default_config = config
    dprint("set_default_config()", config.masked())
    return config


def reset_default_config() -> None:
    """Forget the registered default (the next lookup re-reads the environment)."""
    global _default_config
    _default_config = None


__all__ = [
    "ApiEnvironment",
    "API_ENVIRONMENTS",
    "AfterpayConfig",
    "check_api_environment",
    "get_default_config",
    "set_default_config",
    "reset_default_config",
]
