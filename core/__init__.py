#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for the order subscription service.

COMPONENTS:
    - config/: Environment-driven configuration (subscription service, logging)
    - logger.py: Service logger setup

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("order_subscription_service")
"""
