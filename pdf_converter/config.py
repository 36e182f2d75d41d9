import logging
import math
import os

from dotenv import find_dotenv, load_dotenv

from pdf_converter.logger_config import get_logger

logger = get_logger(__name__)


class Config:
    """Defaults taken from environment variables (or a .env file)."""

    DEFAULT_SCALE: float = 1.0
    DEFAULT_OUTPUT: str = "."
    LOG_LEVEL: str = "INFO"

    @classmethod
    def load(cls) -> bool:
        """Load and validate configuration.

        Returns:
            bool: True if every value set in the environment is valid, False otherwise.
        """
        cls.reset()
        load_dotenv(find_dotenv(usecwd=True))

        scale_str = os.getenv("PDF_CONVERTER_SCALE")
        if scale_str:
            try:
                scale = float(scale_str)
            except ValueError:
                logger.error(f"Invalid PDF_CONVERTER_SCALE: '{scale_str}' is not a number")
                return False
            if not math.isfinite(scale) or scale <= 0:
                logger.error(f"Invalid PDF_CONVERTER_SCALE: '{scale_str}' must be a positive number")
                return False
            cls.DEFAULT_SCALE = scale

        output = os.getenv("PDF_CONVERTER_OUTPUT")
        if output:
            cls.DEFAULT_OUTPUT = output

        level = os.getenv("PDF_CONVERTER_LOG_LEVEL")
        if level:
            level = level.upper()
            if not isinstance(logging.getLevelName(level), int):
                logger.error(f"Invalid PDF_CONVERTER_LOG_LEVEL: '{level}'")
                return False
            cls.LOG_LEVEL = level

        return True

    @classmethod
    def reset(cls) -> None:
        cls.DEFAULT_SCALE = 1.0
        cls.DEFAULT_OUTPUT = "."
        cls.LOG_LEVEL = "INFO"
