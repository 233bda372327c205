# tests/conftest.py

import pytest

from afterpay import config as config_module
from afterpay.config import AfterpayConfig
from afterpay.debug import set_debug


AFTERPAY_ENV_VARS = (
    "AFTERPAY_MERCHANT_ID",
    "AFTERPAY_SECRET_KEY",
    "AFTERPAY_COUNTRY_CODE",
    "AFTERPAY_API_ENVIRONMENT",
    "AFTERPAY_LOG_OBFUSCATION",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # Each test starts with no AFTERPAY_* env, no registered default and debug off
    for name in AFTERPAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_default_config()
    set_debug(False)
    yield
    config_module.reset_default_config()
    set_debug(False)


@pytest.fixture
def cfg() -> AfterpayConfig:
    return AfterpayConfig(
        merchant_id="100101382",
        secret_key="s3cr3t-key-value",
        country_code="AU",
        api_environment="sandbox",
    )


@pytest.fixture
def cfg_no_obfuscation(cfg: AfterpayConfig) -> AfterpayConfig:
    return cfg.copy_with(log_obfuscation_enabled=False)
