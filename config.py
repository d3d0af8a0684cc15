# config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from paths import SEED_FILE

# Ladda miljövariabler från .env
load_dotenv()

STRATEGIES = ("falsy", "presence")


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime settings for the mock API, read from the environment."""

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "DEBUG"
    seed_file: str = str(SEED_FILE)
    default_strategy: str = "falsy"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        self.default_strategy = self.default_strategy.lower()
        if self.default_strategy not in STRATEGIES:
            raise ValueError(
                f"DEFAULT_STRATEGY must be one of {', '.join(STRATEGIES)}, "
                f"got {self.default_strategy!r}"
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "DEBUG"),
            seed_file=os.getenv("SEED_FILE", str(SEED_FILE)),
            default_strategy=os.getenv("DEFAULT_STRATEGY", "falsy"),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        )
