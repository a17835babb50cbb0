"""
Configuration settings for apiendpoint.

This module provides the environment-driven settings and the typed
configuration object handed to every endpoint.
"""

import os
from typing import Dict, FrozenSet, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apiendpoint.utils.error_handling import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_HTTP_VERBS = "GET,POST,PUT,PATCH,DELETE,HEAD,OPTIONS"
DEFAULT_ANNOTATION_MARKER = "@api"


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated setting into its non-empty, trimmed items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Application settings.

    Load configuration from environment variables or .env file.
    """
    # HTTP verbs an endpoint may expose (comma-separated, upper-case)
    valid_http_verbs: str = os.getenv("VALID_HTTP_VERBS", DEFAULT_HTTP_VERBS)

    # Media types advertised in OPTIONS responses (comma-separated)
    content_types: str = os.getenv("CONTENT_TYPES", "application/json")
    accept_types: str = os.getenv("ACCEPT_TYPES", "application/json")

    # Prefix identifying documentation tags in verb docstrings
    annotation_marker: str = os.getenv("ANNOTATION_MARKER", DEFAULT_ANNOTATION_MARKER)

    # Development mode
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE", None)
    enable_file_logging: bool = os.getenv("ENABLE_FILE_LOGGING", "False").lower() == "true"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def validate_settings(self) -> Dict[str, str]:
        """
        Validate all settings and return any warnings or errors.

        Returns:
            Dictionary of validation messages
        """
        validation_messages = {}

        verbs = split_csv(self.valid_http_verbs)
        if not verbs:
            validation_messages["valid_http_verbs"] = "No valid HTTP verbs configured"
        else:
            lowercase = [verb for verb in verbs if verb != verb.upper()]
            if lowercase:
                validation_messages["valid_http_verbs"] = (
                    f"HTTP verbs must be upper-case: {', '.join(lowercase)}"
                )

        if not split_csv(self.content_types):
            validation_messages["content_types"] = "No content types configured"

        if not split_csv(self.accept_types):
            validation_messages["accept_types"] = "No accept types configured"

        if not self.annotation_marker.strip():
            validation_messages["annotation_marker"] = "Annotation marker must not be empty"

        return validation_messages

    def configure_logging(self) -> None:
        """Configure logging based on settings."""
        import logging

        # Set log level
        log_level = getattr(logging, self.log_level.upper(), logging.INFO)
        if self.debug:
            log_level = logging.DEBUG

        # Basic configuration
        logging_config = {
            'level': log_level,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        }

        # Add file handler if enabled
        if self.enable_file_logging and self.log_file:
            logging_config['filename'] = self.log_file
            logging_config['filemode'] = 'a'

        # Apply configuration
        logging.basicConfig(**logging_config)


class EndpointConfig(BaseModel):
    """
    Typed configuration passed to every endpoint.

    valid_http_verbs is the whitelist that implemented methods are filtered
    against when answering OPTIONS requests.
    """
    model_config = ConfigDict(frozen=True)

    valid_http_verbs: FrozenSet[str] = Field(default_factory=lambda: frozenset(split_csv(DEFAULT_HTTP_VERBS)))
    content_types: List[str] = Field(default_factory=lambda: ["application/json"])
    accept_types: List[str] = Field(default_factory=lambda: ["application/json"])
    annotation_marker: str = DEFAULT_ANNOTATION_MARKER

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "EndpointConfig":
        """
        Build an endpoint configuration from application settings.

        Args:
            source: Settings to read, defaults to the global settings

        Returns:
            EndpointConfig

        Raises:
            ConfigurationError: If the annotation marker is empty
        """
        source = source or settings

        marker = source.annotation_marker.strip()
        if not marker:
            raise ConfigurationError(
                "Annotation marker must not be empty",
                component="config",
                details={"annotation_marker": source.annotation_marker}
            )

        return cls(
            valid_http_verbs=frozenset(split_csv(source.valid_http_verbs)),
            content_types=split_csv(source.content_types),
            accept_types=split_csv(source.accept_types),
            annotation_marker=marker
        )


# Create a global settings instance
settings = Settings()

# Automatically configure logging
settings.configure_logging()


def print_settings() -> str:
    """
    Generate a printable string of current settings.

    Returns:
        String representation of settings
    """
    lines = ["Current Settings:"]

    for key, value in sorted(settings.model_dump().items()):
        lines.append(f"  {key}: {value}")

    return "\n".join(lines)


def validate_environment() -> None:
    """
    Validate the environment and display warnings or errors.
    """
    import logging
    logger = logging.getLogger(__name__)

    # Validate settings
    validation_messages = settings.validate_settings()

    if validation_messages:
        logger.warning("Environment validation found issues:")
        for category, message in validation_messages.items():
            logger.warning(f"  {category}: {message}")
    else:
        logger.debug("Environment validation: All checks passed")


# Auto-validate environment when module is imported
validate_environment()
