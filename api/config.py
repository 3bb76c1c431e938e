"""
Runtime configuration for the VendoAI backend.

Values come from environment variables, optionally seeded from a .env file
in the working directory. Every variable has a default, so the server runs
with no configuration at all.

    PORT=8080
    HOST=0.0.0.0
    FRONTEND_PATH=./frontend/build
    FRONTEND_ORIGIN=http://localhost:3000
    APP_MODE=debug
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("vendoai")

DEBUG = "debug"
RELEASE = "release"
MODES = (DEBUG, RELEASE)

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"


@dataclass(frozen=True)
class Settings:
    """Server settings resolved from the environment."""
    port: int = 8080
    host: str = "0.0.0.0"
    frontend_path: Path = Path("./frontend/build")
    frontend_origin: str = ""
    mode: str = DEBUG

    @property
    def release(self) -> bool:
        return self.mode == RELEASE

    @property
    def cors_origins(self) -> list[str]:
        """
        Allowed CORS origins.

        An unset origin allows every origin. That is a development default,
        not a security boundary.
        """
        if not self.frontend_origin:
            return ["*"]
        return [self.frontend_origin]

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ValueError: If PORT is not an integer or APP_MODE is unknown
        """
        if load_env_file and not load_dotenv():
            logger.info(".env not found, relying on environment variables")

        raw_port = os.getenv("PORT") or "8080"
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

        mode = (os.getenv("APP_MODE") or DEBUG).lower()
        if mode not in MODES:
            raise ValueError(f"APP_MODE must be one of {MODES}, got {mode!r}")

        return cls(
            port=port,
            host=os.getenv("HOST") or "0.0.0.0",
            frontend_path=Path(os.getenv("FRONTEND_PATH") or "./frontend/build"),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", "").strip(),
            mode=mode,
        )


def configure_logging(mode: str = DEBUG) -> None:
    """Configure root logging for the given mode."""
    logging.basicConfig(
        level=logging.DEBUG if mode == DEBUG else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
