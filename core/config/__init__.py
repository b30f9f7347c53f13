#!/usr/bin/env python3
"""Configuration for the order subscription service

Configuration hierarchy:
- subscription_config: Subscription billing service and Stripe settings
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .subscription_config import SubscriptionServiceConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = SubscriptionServiceConfig.from_env()

def get_settings() -> SubscriptionServiceConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> SubscriptionServiceConfig:
    """Reload settings from environment"""
    global settings
    settings = SubscriptionServiceConfig.from_env()
    return settings

__all__ = [
    'SubscriptionServiceConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
