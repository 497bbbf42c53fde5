import logging
import os
from dataclasses import dataclass


COOL_SYMMETRIC = "symmetric"
COOL_LEGACY = "legacy"
COOL_MODES = (COOL_SYMMETRIC, COOL_LEGACY)


@dataclass
class TransformSettings:
    source_url: str
    port: int
    timeout: float
    retries: int
    cache_ttl: float
    cool_mode: str
    default_delta: int
    log_level: str

    @classmethod
    def from_env(cls) -> "TransformSettings":
        return cls(
            source_url=os.getenv("SOURCE_URL", "http://127.0.0.1:8000/source.png"),
            port=int(os.getenv("PORT", "5600")),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            retries=int(os.getenv("SOURCE_RETRIES", "2")),
            cache_ttl=float(os.getenv("CACHE_TTL", "5")),
            cool_mode=os.getenv("COOL_MODE", COOL_SYMMETRIC).lower(),
            default_delta=int(os.getenv("DEFAULT_DELTA", "30")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


SETTINGS = TransformSettings.from_env()


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: TransformSettings = SETTINGS) -> logging.Logger:
    """Install a root handler once and apply the configured level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level.upper())
    return logging.getLogger("pixel-transforms")
