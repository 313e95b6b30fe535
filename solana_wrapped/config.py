"""Configuration module for the Solana Wrapped server."""

# Standard library imports
import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Callable, List, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from solana_wrapped.constants import DEFAULT_TOKEN_LIST_URL, MAX_PAGE_SIZE
from solana_wrapped.utils.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None or value == "":
        if required:
            raise ConfigurationError(f"Required environment variable '{key}' not found")
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"key": key}
            )

    return value


def bool_validator(value: str) -> bool:
    """Validate and convert string to boolean.

    Args:
        value: String value to convert

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "y", "on")


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def positive_int_validator(value: str) -> int:
    """Validate and convert string to a strictly positive integer."""
    number = int_validator(value)
    if number < 1:
        raise ValueError(f"'{value}' must be a positive integer")
    return number


def page_size_validator(value: str) -> int:
    """Validate a page size against the provider's maximum."""
    number = positive_int_validator(value)
    if number > MAX_PAGE_SIZE:
        raise ValueError(f"'{value}' exceeds the maximum page size of {MAX_PAGE_SIZE}")
    return number


def float_validator(value: str) -> float:
    """Validate and convert string to a non-negative float."""
    try:
        number = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number")
    if number < 0:
        raise ValueError(f"'{value}' must not be negative")
    return number


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL without a trailing slash

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value.rstrip("/")


def log_level_validator(value: str) -> str:
    """Validate log level.

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def environment_validator(value: str) -> str:
    """Validate environment name.

    Raises:
        ValueError: If not a valid environment name
    """
    valid_environments = ("development", "testing", "staging", "production")
    if value.lower() not in valid_environments:
        raise ValueError(f"Environment must be one of: {', '.join(valid_environments)}")
    return value.lower()


@dataclass
class HeliusConfig:
    """Configuration for the Helius transaction and metadata APIs."""

    api_key: Optional[str] = None
    rpc_url: str = "https://mainnet.helius-rpc.com"
    api_url: str = "https://api.helius.xyz/v0"
    timeout: int = 30  # seconds

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)

    def require_api_key(self) -> str:
        """Return the API key or fail before any upstream call is made.

        Raises:
            ConfigurationError: If HELIUS_API_KEY is not set
        """
        if not self.api_key:
            raise ConfigurationError("HELIUS_API_KEY not configured")
        return self.api_key


@lru_cache()
def get_helius_config() -> HeliusConfig:
    """Get Helius configuration from environment variables.

    Uses cached values for efficiency. The API key is optional here; requests
    check for it so that the server can start without one.

    Returns:
        HeliusConfig instance
    """
    return HeliusConfig(
        api_key=get_env_var("HELIUS_API_KEY"),
        rpc_url=get_env_var("HELIUS_RPC_URL", "https://mainnet.helius-rpc.com",
                            validator=url_validator),
        api_url=get_env_var("HELIUS_API_URL", "https://api.helius.xyz/v0",
                            validator=url_validator),
        timeout=get_env_var("HELIUS_TIMEOUT", 30, validator=positive_int_validator)
    )


@dataclass
class WrappedConfig:
    """Configuration for the year-in-review pipeline."""

    year: int = 2025
    page_size: int = MAX_PAGE_SIZE
    max_pages: int = 100
    page_delay_seconds: float = 0.1
    token_list_url: str = DEFAULT_TOKEN_LIST_URL

    @property
    def year_start_timestamp(self) -> int:
        """Unix timestamp of January 1st 00:00 UTC of the configured year."""
        return int(datetime(self.year, 1, 1, tzinfo=timezone.utc).timestamp())

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ConfigurationError(f"Invalid page_size: {self.page_size}")
        if self.max_pages < 1:
            raise ConfigurationError(f"Invalid max_pages: {self.max_pages}")
        if self.page_delay_seconds < 0:
            raise ConfigurationError(f"Invalid page_delay_seconds: {self.page_delay_seconds}")


@lru_cache()
def get_wrapped_config() -> WrappedConfig:
    """Get pipeline configuration from environment variables.

    Returns:
        WrappedConfig instance
    """
    return WrappedConfig(
        year=get_env_var("WRAPPED_YEAR", 2025, validator=positive_int_validator),
        page_size=get_env_var("WRAPPED_PAGE_SIZE", MAX_PAGE_SIZE, validator=page_size_validator),
        max_pages=get_env_var("WRAPPED_MAX_PAGES", 100, validator=positive_int_validator),
        page_delay_seconds=get_env_var("WRAPPED_PAGE_DELAY", 0.1, validator=float_validator),
        token_list_url=get_env_var("TOKEN_LIST_URL", DEFAULT_TOKEN_LIST_URL,
                                   validator=url_validator)
    )


@dataclass
class ServerConfig:
    """Configuration for the server."""

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def bind_address(self) -> str:
        """Get the bind address for the server."""
        return f"{self.host}:{self.port}"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.environment not in ("development", "testing", "staging", "production"):
            raise ConfigurationError(f"Invalid environment: {self.environment}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")


@lru_cache()
def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Returns:
        ServerConfig instance
    """
    return ServerConfig(
        host=get_env_var("HOST", "0.0.0.0"),
        port=get_env_var("PORT", 8000, validator=int_validator),
        debug=get_env_var("DEBUG", False, validator=bool_validator),
        environment=get_env_var("ENVIRONMENT", "development", validator=environment_validator),
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator),
        cors_origins=get_env_var("CORS_ORIGINS", "*").split(",")
    )
