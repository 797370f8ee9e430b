import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _optional_float(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() == "true"
    # 0 means no upper bound on the uploaded image.
    max_body_bytes: int = int(os.getenv("RELAY_MAX_BODY_BYTES", "0"))
    # None disables the upstream timeout entirely.
    upstream_timeout_s: float | None = _optional_float(os.getenv("RELAY_UPSTREAM_TIMEOUT_S", ""))


settings = Settings()


@dataclass(frozen=True)
class RelayConfig:
    """Azure Custom Vision settings, resolved once and injected into the handler."""

    prediction_key: str = ""
    endpoint: str = ""
    project_id: str = ""
    iteration_name: str = ""

    ENV_NAMES = {
        "prediction_key": "AZURE_PREDICTION_KEY",
        "endpoint": "AZURE_ENDPOINT",
        "project_id": "AZURE_PROJECT_ID",
        "iteration_name": "AZURE_ITERATION_NAME",
    }

    @classmethod
    def from_env(cls) -> "RelayConfig":
        return cls(**{field: os.getenv(env_name, "") for field, env_name in cls.ENV_NAMES.items()})

    def missing_fields(self) -> list[str]:
        return [env_name for field, env_name in self.ENV_NAMES.items() if not getattr(self, field)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()
