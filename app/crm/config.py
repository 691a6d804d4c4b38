import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    env: str
    port: int
    cors_origin: str

    customer_count: int
    mock_seed: int | None

    log_level: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getenv_int(name: str, default: int | None) -> int | None:
    raw = _getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer (got {raw!r}).") from None


def load_settings() -> Settings:
    return Settings(
        env=_getenv("ENV", "development"),
        port=_getenv_int("PORT", 5000),
        cors_origin=_getenv("CORS_ORIGIN", "http://localhost:3000"),
        customer_count=_getenv_int("CUSTOMER_COUNT", 100),
        mock_seed=_getenv_int("MOCK_SEED", None),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "ENV": s.env,
        "PORT": s.port,
        "CORS_ORIGIN": s.cors_origin,
        "CUSTOMER_COUNT": s.customer_count,
        "MOCK_SEED": s.mock_seed,
        "LOG_LEVEL": s.log_level,
    }
