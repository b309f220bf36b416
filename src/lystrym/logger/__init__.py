"""Project logging."""

from lystrym.logger.logger import HANDLER_NAME, logger, setup_logger

__all__ = ["logger", "setup_logger", "HANDLER_NAME"]
