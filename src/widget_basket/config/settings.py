"""
Centralized settings and path configuration for the basket calculator.
"""
import decimal
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_data_dir() -> Path:
    """Get the directory holding the bundled configuration CSVs."""
    return Path(__file__).resolve().parent.parent / 'data'


ROUNDING_MODES = (
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
)


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    data_dir: Path

    # Configuration files
    catalog_csv: Path
    delivery_rules_csv: Path
    offers_csv: Path

    # decimal rounding mode applied to the final total
    rounding: str = decimal.ROUND_HALF_UP

    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(
                f"Unknown rounding mode {self.rounding!r}. Valid modes: {', '.join(ROUNDING_MODES)}"
            )

    @classmethod
    def load(cls, data_dir: Optional[Path] = None, **overrides) -> 'Settings':
        """Load settings, reading configuration files from data_dir."""
        root = Path(data_dir) if data_dir else get_data_dir()

        return cls(
            data_dir=root,
            catalog_csv=root / 'catalog.csv',
            delivery_rules_csv=root / 'delivery_rules.csv',
            offers_csv=root / 'offers.csv',
            **overrides,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
