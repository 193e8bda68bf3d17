"""
Runtime configuration read from environment variables (and a local .env file).

Settings are read once by the composition root and injected into adapters;
nothing below the entrypoints reads os.environ directly.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.domain.exceptions import ConfigurationError
from src.domain.ports.secret_store_port import ISecretStore

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    alpha_vantage_timeout_seconds: float = 10.0
    narrative_enabled: bool = True
    narrative_model_id: str = "us.amazon.nova-pro-v1:0"
    narrative_temperature: float = 0.3
    narrative_timeout_seconds: float = 30.0
    aws_region: str = "us-east-1"
    currency_symbol: str = "₹"
    log_level: str = "INFO"
    langfuse_enabled: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Settings":
        """Build settings from an environment mapping.

        Raises:
            ConfigurationError: if a numeric or boolean variable cannot be parsed.
        """
        return cls(
            alpha_vantage_api_key=env.get("ALPHA_VANTAGE_API_KEY") or None,
            alpha_vantage_base_url=env.get("ALPHA_VANTAGE_BASE_URL", cls.alpha_vantage_base_url),
            alpha_vantage_timeout_seconds=_float(env, "ALPHA_VANTAGE_TIMEOUT_SECONDS", 10.0),
            narrative_enabled=_bool(env, "NARRATIVE_ENABLED", True),
            narrative_model_id=env.get("NARRATIVE_MODEL_ID", cls.narrative_model_id),
            narrative_temperature=_float(env, "NARRATIVE_TEMPERATURE", 0.3),
            narrative_timeout_seconds=_float(env, "NARRATIVE_TIMEOUT_SECONDS", 30.0),
            aws_region=env.get("AWS_DEFAULT_REGION", cls.aws_region),
            currency_symbol=env.get("CURRENCY_SYMBOL", cls.currency_symbol),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            langfuse_enabled=bool(env.get("LANGFUSE_PUBLIC_KEY")),
        )


def load_settings(secret_store: Optional[ISecretStore] = None) -> Settings:
    """Load .env, optionally merge an AWS Secrets Manager secret, then read settings.

    When APP_SECRET_ARN is set, the secret's key/value pairs are copied into
    os.environ for keys that are not already set, so LANGFUSE_* and the
    provider key are visible process-wide before any SDK reads them.
    """
    load_dotenv()
    secret_arn = os.environ.get("APP_SECRET_ARN")
    if secret_arn:
        if secret_store is None:
            from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
            secret_store = SecretsManagerAdapter()
        for key, value in secret_store.get_secret(secret_arn).items():
            os.environ.setdefault(key, str(value))
    return Settings.from_env(os.environ)


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc
    if value <= 0 and key.endswith("_SECONDS"):
        raise ConfigurationError(f"{key} must be positive, got {raw!r}")
    return value


def _bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")
