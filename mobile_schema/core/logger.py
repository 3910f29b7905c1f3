"""
Logging configuration using Loguru.

Console output is colorized in debug mode. With debug off, records also go to
a rotated file under `settings.log_dir`. Every record carries the schema
version the compiler emits, so log lines can be matched to exported
documents.
"""
import sys
from pathlib import Path
from loguru import logger

from mobile_schema.config import settings
from mobile_schema.models.schemas.core import MOBILE_SCHEMA_VERSION


_configured = False

DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>schema {extra[schema_version]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

PROD_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "schema {extra[schema_version]} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logging(force: bool = False) -> None:
    """
    Install the loguru handlers.

    Safe to call more than once; later calls are no-ops unless `force` is set.

    Args:
        force: Reinstall handlers even if logging was already configured
    """
    global _configured
    if _configured and not force:
        return

    logger.remove()
    logger.configure(extra={"schema_version": MOBILE_SCHEMA_VERSION})

    logger.add(
        sys.stdout,
        format=DEV_FORMAT if settings.debug else PROD_FORMAT,
        level=settings.log_level,
        colorize=settings.debug,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    if not settings.debug:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "mobile-schema.log",
            format=PROD_FORMAT,
            level=settings.log_level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
            enqueue=True,
        )

    _configured = True

    logger.info(
        f"Logging configured - level={settings.log_level} "
        f"environment={settings.environment} file_logging={not settings.debug}"
    )
