from __future__ import annotations
import argparse, json
from typing import Any
from afterpay import AfterpayConfig, set_debug_enabled
from afterpay.debug import dprint

def add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--merchant-id", default=None, help="Override AFTERPAY_MERCHANT_ID")
    p.add_argument("--secret-key", default=None, help="Override AFTERPAY_SECRET_KEY")
    p.add_argument("--country-code", default=None, help="Override AFTERPAY_COUNTRY_CODE")
    p.add_argument("--api-environment", default=None, help="sandbox | production")
    p.add_argument("--no-obfuscation", action="store_true", help="Log raw HTTP without redaction")
    p.add_argument("--debug", type=int, default=None, help="Set debug 1/0 (overrides AFTERPAY_DEBUG)")

def make_config_from_args(args) -> AfterpayConfig:
    if args.debug is not None:
        set_debug_enabled(bool(args.debug))
    cfg = AfterpayConfig(
        merchant_id=args.merchant_id,
        secret_key=args.secret_key,
        country_code=args.country_code,
        api_environment=args.api_environment,
        log_obfuscation_enabled=(False if args.no_obfuscation else None),
    )
    dprint("[COMMON] Config", cfg.masked())
    return cfg

def pretty(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)
