"""Application initialization and setup.

Tasks required before the application starts: environment variable loading
and logging configuration.
"""

from dotenv import load_dotenv

from inkwell.core.logging import configure_logging


def initialize_application() -> None:
    """Load ``.env`` into the process environment and configure logging."""
    load_dotenv(override=False)

    # Imported after load_dotenv so the settings singleton sees .env values.
    from inkwell.core.config.settings import settings

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
