#!/usr/bin/env python3
"""
Module: environconfig
Created: 2026-10-18T10:44:18+01:00
Project: strain_api
Template: script
"""
import os
from typing import Dict, Optional

from dotenv import load_dotenv  # pip install python-dotenv


class EnvironmentConfig:
    """Configuration from environment variables (and a .env file if present)"""

    def __init__(self, dotenv_path: Optional[str] = None):
        load_dotenv(dotenv_path)

        self.api_key = self._get_required_env('STRAIN_API_KEY')
        self.timeout = self._get_timeout('STRAIN_API_TIMEOUT')
        self.log_level = self._get_optional_env('STRAIN_API_LOG_LEVEL') or 'WARNING'

    def _get_required_env(self, key: str) -> str:
        """Get required environment variable"""
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Required environment variable {key} is not set")
        return value

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get optional environment variable"""
        return os.getenv(key)

    def _get_timeout(self, key: str) -> Optional[float]:
        """Seconds to wait on the API; unset or empty means wait forever"""
        value = self._get_optional_env(key)
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Environment variable {key} must be a number of seconds, got {value!r}")

    def validate_all(self) -> Dict[str, bool]:
        """Check which settings are available"""
        return {
            'api_key': bool(self.api_key),
            'timeout': self.timeout is not None,
        }


if __name__ == '__main__':
    # Usage
    config = EnvironmentConfig()
    print("Configured:", config.validate_all())
