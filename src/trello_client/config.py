"""
Configuration constants for the Trello API client.

This module centralizes all configurable parameters to make the client
easy to tune and adapt to different environments.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://api.trello.com/1"
    # Only used when the client builds its own httpx.Client
    timeout_seconds: float = 30.0
    form_content_type: str = "application/x-www-form-urlencoded"
    
    # Credential query parameter names
    key_param: str = "key"
    token_param: str = "token"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "trello_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
