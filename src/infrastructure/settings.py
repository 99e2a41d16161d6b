"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the possession ledger backend.

    Attributes:
        backend: Backend identifier (memory or sqlalchemy).
        possessions_file: Optional JSON file seeding the memory backend.
        currency_code: Currency code attached to patrimony figures.
    """

    backend: str = "memory"
    possessions_file: Optional[Path] = None
    currency_code: str = DEFAULT_CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("LEDGER_BACKEND", "memory").strip().lower()
        raw_file = os.getenv("POSSESSIONS_FILE")
        currency_code = (
            os.getenv("PATRIMONY_CURRENCY", DEFAULT_CURRENCY_CODE)
            .strip()
            .upper()
            or DEFAULT_CURRENCY_CODE
        )
        logger = get_app_logger()
        if raw_file:
            possessions_file = cls._normalize_path(raw_file, logger=logger)
        else:
            possessions_file = cls._default_possessions_file()
        return cls(
            backend=backend,
            possessions_file=possessions_file,
            currency_code=currency_code,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the possessions file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Possessions file does not exist at {path}")
        return path

    @staticmethod
    def _default_possessions_file() -> Path | None:
        """Return data/possessions.json when the repository ships one."""
        candidate = get_project_root() / "data" / "possessions.json"
        if candidate.exists():
            return candidate.resolve()
        return None


__all__ = ["LedgerSettings"]
