"""Configuration from environment."""

from deps import Optional, Path, load_dotenv, os

from baseline_checker.issue import DEFAULT_MIN_LEVEL, MIN_LEVELS

load_dotenv()


def get_min_level() -> str:
    """Default minimum Baseline level for requests that do not set one. Default: high."""
    level = os.environ.get("BASELINE_MIN_LEVEL", DEFAULT_MIN_LEVEL).strip().lower()
    return level if level in MIN_LEVELS else DEFAULT_MIN_LEVEL


def get_features_data_path() -> Optional[Path]:
    """Path to a web-features data.json. Unset: the bundled sample dataset."""
    value = os.environ.get("WEB_FEATURES_DATA", "").strip()
    return Path(value).expanduser() if value else None


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000
