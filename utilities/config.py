"""
Configuration management using environment variables.
Handles upstream catalog and logging settings with validation and defaults.
"""

from typing import Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings
from pathlib import Path


class CatalogConfig(BaseSettings):
    """
    Configuration class for the upstream book catalog.
    Uses pydantic BaseSettings for environment variable management.
    """

    # Upstream Configuration
    upstream_url: str = Field(default="https://the-one-api.dev/v2/book?limit=100", env="UPSTREAM_URL")
    upstream_api_token: Optional[str] = Field(default=None, env="UPSTREAM_API_TOKEN")
    request_timeout: Optional[float] = Field(default=None, env="REQUEST_TIMEOUT")

    # Error Reporting
    expose_transport_errors: bool = Field(default=True, env="EXPOSE_TRANSPORT_ERRORS")

    # Logging Configuration
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_format: str = Field(default="json", env="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, env="LOG_FILE")

    # Development/Testing
    debug: bool = Field(default=False, env="DEBUG")

    @validator('upstream_url')
    def validate_upstream_url(cls, v):
        """Ensure the upstream URL is absolute http(s)."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('upstream_url must start with http:// or https://')
        return v

    @validator('request_timeout')
    def validate_timeout(cls, v):
        """Ensure timeout is reasonable when set."""
        if v is not None and (v <= 0 or v > 300):
            raise ValueError('request_timeout must be between 0 and 300 seconds')
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @validator('log_format')
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from .env

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path as Path object."""
        if self.log_file:
            return Path(self.log_file)
        return None

    def get_user_agent(self) -> str:
        """Get user agent string for requests."""
        return "MiddleEarthBooks/1.0"

    def get_headers(self) -> dict:
        """Get default headers for upstream requests."""
        headers = {
            "User-Agent": self.get_user_agent(),
            "Accept": "application/json",
        }
        if self.upstream_api_token:
            headers["Authorization"] = f"Bearer {self.upstream_api_token}"
        return headers

    def get_client_options(self) -> dict:
        """Keyword arguments for ``httpx.AsyncClient``."""
        options = {"headers": self.get_headers()}
        if self.request_timeout is not None:
            options["timeout"] = self.request_timeout
        return options


# Global configuration instance
config = CatalogConfig()
