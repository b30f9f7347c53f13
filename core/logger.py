#!/usr/bin/env python3
"""
Service logger setup

Usage:
    from core.logger import setup_service_logger
    logger = setup_service_logger("order_subscription_service")
"""
import logging
from pathlib import Path
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return the logger for a service.

    Console output is always enabled; a file handler is added when
    LOG_FILE is set. Calling it again for the same service returns the
    already configured logger without adding handlers.
    """
    config = config or LoggingConfig.from_env()

    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    # Avoid duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logger initialized for {service_name} ({config.environment})")
    return logger
