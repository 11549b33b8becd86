"""Load and validate environment variables. Uses python-dotenv.

Only the wiring layer (`SharedModule.from_env`) and the Streamlit entry point
read configuration; the fetch/state pipeline receives plain values.
"""

from pathlib import Path

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding pyproject.toml)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Existing environment variables win over .env values.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=False)


def get_required(key: str) -> str:
    """
    Get required env var. Raises if missing or empty.

    Raises:
        ValueError: If key is missing or empty after trimming.
    """
    load_config()
    val = os.getenv(key, "").strip()
    if not val:
        raise ValueError(
            f"Missing required environment variable: {key}. "
            "Set it in .env or export it."
        )
    return val


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_optional_float(key: str, default: float) -> float:
    """Get optional env var as a positive float; return default if missing or invalid."""
    load_config()
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


# --- Public config accessors ---

def users_api_base_url() -> str:
    """Required: base URL of the users API, e.g. https://jsonplaceholder.typicode.com."""
    return get_required("USERS_API_BASE_URL").rstrip("/")


def http_connect_timeout() -> float:
    """Optional: connect timeout in seconds. Default 10."""
    return get_optional_float("HTTP_CONNECT_TIMEOUT", 10.0)


def http_request_timeout() -> float:
    """Optional: overall request deadline in seconds. Default 30."""
    return get_optional_float("HTTP_REQUEST_TIMEOUT", 30.0)


def http_socket_timeout() -> float:
    """Optional: socket read timeout in seconds. Default 30."""
    return get_optional_float("HTTP_SOCKET_TIMEOUT", 30.0)


def log_level() -> str:
    """Optional: log level name. Default INFO."""
    return get_optional("LOG_LEVEL", "INFO").upper()


def project_root() -> Path:
    """Project root directory."""
    return _project_root()
