"""Configuration management for the Gett CLI."""

import json
import os
import shutil
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from gett.config import API_URL, REQUEST_TIMEOUT

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "api_url": API_URL,
        "timeout": REQUEST_TIMEOUT,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.gett/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _defaults(self) -> dict:
        config = self.DEFAULT_CONFIG.copy()
        apikey = os.environ.get("GETT_API_KEY")
        if apikey:
            config["apikey"] = apikey
        return config

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self._defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Config file {self.config_path} unreadable ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self._defaults()
        else:
            config = self._defaults()
            self._write(config)
            return config

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not write config file {self.config_path}: {e}")

    def save(self) -> None:
        """Save current configuration to file."""
        self._write(self.data)

    def get_apikey(self) -> Optional[str]:
        return self.data.get('apikey')

    def get_email(self) -> Optional[str]:
        return self.data.get('email')

    def get_refresh_token(self) -> Optional[str]:
        """
        Get the refresh token kept from the last login.

        Returns:
            Refresh token string or None if never logged in
        """
        return self.data.get('refresh_token')

    def set_login(self, email: Optional[str], refresh_token: Optional[str]) -> None:
        """
        Remember the account of a successful login and save to file.

        Args:
            email: Account email
            refresh_token: Refresh token returned by the service
        """
        if email:
            self.data['email'] = email
        if refresh_token:
            self.data['refresh_token'] = refresh_token
        self.save()

    def get_api_url(self) -> str:
        """
        Get the Gett API base URL.

        Returns:
            Base URL string (e.g., "https://open.ge.tt/1")
        """
        return self.data.get('api_url', API_URL)

    def get_timeout(self) -> float:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds
        """
        return self.data.get('timeout', REQUEST_TIMEOUT)
