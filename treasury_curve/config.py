"""
Configuration settings for Treasury curve retrieval.
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

# Default endpoint for the daily par yield curve, one CSV per year
DEFAULT_BASE_URL = (
    "https://home.treasury.gov/resource-center/data-chart-center/interest-rates/"
    "daily-treasury-rates.csv/{year}/all?type=daily_treasury_yield_curve"
    "&field_tdr_date_value={year}&page&_format=csv"
)

# First year the Treasury publishes par yield curve data for
MIN_YEAR_AVAIL = 1990

# Days past the last published curve that still resolve to it
MAX_FORWARD_DAYS = 5

ENV_PREFIX = "TREASURY_CURVE_"


@dataclass
class TreasuryCurveConfig:
    """
    Configuration for fetching and querying Treasury curves.

    Attributes:
        base_url: CSV endpoint with a {year} placeholder
        timeout: Seconds to wait on the HTTP request (default: 30)
        min_year: First year that may be requested (default: 1990)
        max_forward_days: Grace window past the latest curve (default: 5)
        user_agent: User-Agent header sent with each request
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    min_year: int = MIN_YEAR_AVAIL
    max_forward_days: int = MAX_FORWARD_DAYS
    user_agent: str = "treasury-curve/1.0"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'TreasuryCurveConfig':
        """
        Create configuration from dictionary.

        Raises:
            ValueError: the dictionary is not a mapping or names an unknown field
        """
        if not isinstance(config_dict, dict):
            raise ValueError(f"configuration must be a JSON object, got {type(config_dict).__name__}")
        unknown = sorted(set(config_dict) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"unknown configuration field(s): {', '.join(unknown)}")
        return cls(**config_dict)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'TreasuryCurveConfig':
        """
        Build configuration from TREASURY_CURVE_* environment variables.

        A .env file is loaded first when present; unset variables keep defaults.

        Raises:
            ValueError: TREASURY_CURVE_TIMEOUT is not a number
        """
        load_dotenv(dotenv_path)
        config = cls()
        if os.getenv(ENV_PREFIX + "BASE_URL"):
            config.base_url = os.environ[ENV_PREFIX + "BASE_URL"]
        if os.getenv(ENV_PREFIX + "TIMEOUT"):
            raw_timeout = os.environ[ENV_PREFIX + "TIMEOUT"]
            try:
                config.timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None
        if os.getenv(ENV_PREFIX + "USER_AGENT"):
            config.user_agent = os.environ[ENV_PREFIX + "USER_AGENT"]
        return config

    def url_for(self, year: int) -> str:
        return self.base_url.format(year=year)

    def validate(self) -> List[str]:
        """
        Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.base_url, str):
            errors.append(f"base_url must be a string, got {self.base_url!r}")
        elif "{year}" not in self.base_url:
            errors.append(f"base_url must contain a {{year}} placeholder: {self.base_url}")

        if not _is_number(self.timeout):
            errors.append(f"timeout must be a number, got {self.timeout!r}")
        elif self.timeout <= 0:
            errors.append(f"timeout must be positive, got {self.timeout}")

        if not _is_integer(self.min_year):
            errors.append(f"min_year must be an integer, got {self.min_year!r}")
        elif self.min_year < MIN_YEAR_AVAIL:
            errors.append(f"min_year cannot be before {MIN_YEAR_AVAIL}, got {self.min_year}")

        if not _is_integer(self.max_forward_days):
            errors.append(f"max_forward_days must be an integer, got {self.max_forward_days!r}")
        elif self.max_forward_days < 0:
            errors.append(f"max_forward_days must be non-negative, got {self.max_forward_days}")

        if not isinstance(self.user_agent, str):
            errors.append(f"user_agent must be a string, got {self.user_agent!r}")

        return errors


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_config_from_file(config_path: str) -> TreasuryCurveConfig:
    """
    Load configuration from a JSON file.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: invalid JSON or an unknown field
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config_dict = json.load(f)

    return TreasuryCurveConfig.from_dict(config_dict)


def save_config_to_file(config_obj: TreasuryCurveConfig, config_path: str) -> None:
    """Save configuration to a JSON file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config_obj.to_dict(), f, indent=2)
