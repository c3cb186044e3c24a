"""
Application configuration read from environment variables
"""
import os
import logging
from typing import Optional
from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

# Properties service configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001")
API_PROPERTIES_PATH = os.getenv("API_PROPERTIES_PATH", "/properties")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

# Timezone used for timestamps in responses
LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/Bogota")

DEBUG = bool(os.getenv("DEBUG", "false").lower() == "true")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HTTP_URL = TypeAdapter(AnyHttpUrl)


class ClientConfig(BaseModel):
    """Options injected into the submission client"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_base_url: str = Field(default=API_BASE_URL, alias="apiBaseUrl", description="Base URL of the properties service")
    properties_path: str = Field(default=API_PROPERTIES_PATH, description="Path of the properties collection")
    timeout: float = Field(default=API_TIMEOUT, gt=0, description="Request timeout in seconds")

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("apiBaseUrl must not be empty")
        try:
            HTTP_URL.validate_python(value)
        except ValidationError:
            raise ValueError(f"apiBaseUrl must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("properties_path")
    @classmethod
    def ensure_leading_slash(cls, value: str) -> str:
        return "/" + value.strip().lstrip("/")

    @property
    def properties_url(self) -> str:
        return f"{self.api_base_url}{self.properties_path}"


def load_client_config(api_base_url: Optional[str] = None) -> ClientConfig:
    """Build the client configuration from the environment"""
    return ClientConfig(
        api_base_url=api_base_url or os.getenv("API_BASE_URL", API_BASE_URL),
        properties_path=os.getenv("API_PROPERTIES_PATH", API_PROPERTIES_PATH),
        timeout=float(os.getenv("API_TIMEOUT", str(API_TIMEOUT))),
    )


def configure_logging():
    """Configure root logging once for the application"""
    level = logging.DEBUG if DEBUG else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
