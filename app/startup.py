"""Startup validation and logging setup."""

from deps import logging, os

from baseline_checker.issue import MIN_LEVELS

from .config import get_features_data_path, get_log_level

logger = logging.getLogger("baseline_api")


def configure_logging() -> None:
    """Root handler for the service; the library itself only has a NullHandler."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def validate_config() -> None:
    """Warn about settings that will fall back to defaults."""
    data_path = get_features_data_path()
    if data_path is not None and not data_path.exists():
        logger.warning(
            "WEB_FEATURES_DATA=%s does not exist; using the bundled sample dataset.", data_path,
        )
    level = os.environ.get("BASELINE_MIN_LEVEL", "").strip().lower()
    if level and level not in MIN_LEVELS:
        logger.warning("BASELINE_MIN_LEVEL=%r is not one of %s; using 'high'.", level, MIN_LEVELS)
