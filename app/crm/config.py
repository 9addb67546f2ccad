import os
from dataclasses import dataclass

# Accepted names for the backend API base URL, in lookup order.
API_ENDPOINT_VARS = ("API_ENDPOINT", "NEXT_PUBLIC_API_ENDPOINT")


class ConfigurationMissing(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    api_endpoint: str
    env: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _api_endpoint() -> str:
    for name in API_ENDPOINT_VARS:
        value = _getenv(name)
        if value:
            return value.rstrip("/")
    raise ConfigurationMissing(f"{API_ENDPOINT_VARS[0]} is not defined")


def load_settings() -> Settings:
    return Settings(
        api_endpoint=_api_endpoint(),
        env=_getenv("ENV", "development"),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "API_ENDPOINT": s.api_endpoint,
        "ENV": s.env,
    }
