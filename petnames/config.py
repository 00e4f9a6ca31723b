# Configuration for the pet name generator
import os

from dotenv import load_dotenv

from petnames.errors import ConfigurationError

load_dotenv()


def _read_float(env_name, default):
    raw = os.getenv(env_name, default)
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{env_name} must be a number, got {raw!r}") from e


# API Configuration
API_KEY_ENV = os.getenv("PETNAMES_API_KEY_ENV", "API_KEY")
FALLBACK_API_KEY_ENV = "GOOGLE_API_KEY"

# Model Configuration
MODEL_NAME = os.getenv("PETNAMES_MODEL", "gemini-2.5-flash")
TEMPERATURE = _read_float("PETNAMES_TEMPERATURE", "0.7")
NAME_COUNT = 5

# Logging Configuration
LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()


def get_api_key():
    """Read the API key from the environment on every call (never cached)."""
    for env_name in (API_KEY_ENV, FALLBACK_API_KEY_ENV):
        value = os.getenv(env_name, "").strip()
        if value:
            return value
    return None
