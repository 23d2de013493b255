import os
import logging
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Resume Service"
SERVICE_VERSION = "1.0.0"

# Settings field -> environment variable it is read from
ENV_VARS = {
    "contract": "RESPONSE_CONTRACT",
    "host": "HOST",
    "port": "PORT",
    "log_level": "LOG_LEVEL",
    "allowed_origins": "ALLOWED_ORIGINS",
    "allowed_hosts": "ALLOWED_HOSTS",
    "enable_docs": "ENABLE_DOCS",
}


class Settings(BaseModel):
    """Runtime settings for the resume service"""
    contract: str = Field("json", pattern=r'^(json|text)$')
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)
    log_level: str = Field("INFO", pattern=r'^(CRITICAL|ERROR|WARNING|INFO|DEBUG)$')
    allowed_origins: List[str] = ["http://localhost:3000"]
    allowed_hosts: List[str] = ["*"]
    enable_docs: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file if present)"""
        load_dotenv()

        try:
            return cls(
                contract=os.getenv("RESPONSE_CONTRACT", "json").strip().lower(),
                host=os.getenv("HOST", "127.0.0.1"),
                port=int(os.getenv("PORT", 8000)),
                log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
                allowed_origins=_split(os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")),
                allowed_hosts=_split(os.getenv("ALLOWED_HOSTS", "*")),
                enable_docs=os.getenv("ENABLE_DOCS", "false").lower() in ("1", "true", "yes"),
            )
        except ValidationError as e:
            fields = ", ".join(ENV_VARS.get(str(err["loc"][0]), str(err["loc"][0])) for err in e.errors())
            raise ValueError(f"Invalid configuration for: {fields}") from e
        except ValueError as e:
            # int() on PORT
            raise ValueError(f"Invalid configuration for: PORT ({e})") from e


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
