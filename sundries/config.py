# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Library settings with environment variable and YAML support."""
import os
from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sundries.core.types import RetryOptions


DEFAULT_SETTINGS_FILE = "settings.sundries.yaml"


class SundriesSettings(BaseSettings):
    """Defaults applied by callers of the sundries helpers.

    All settings can be overridden via environment variables with the
    SUNDRIES_ prefix. Example: SUNDRIES_RETRY_ATTEMPTS=5.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUNDRIES_",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level for configure_logging",
    )
    retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts used by retry_options()",
    )
    retry_delay_ms: float = Field(
        default=0,
        ge=0,
        description="Delay between attempts used by retry_options()",
    )

    def retry_options(self) -> RetryOptions:
        """Build the retry policy these settings describe."""
        return RetryOptions(attempts=self.retry_attempts, delay_ms=self.retry_delay_ms)


def load_settings(config_path: Path | None = None) -> SundriesSettings:
    """Load settings from a YAML file; YAML values win over environment variables.

    Resolution order:
    1. Explicit config_path parameter (if provided)
    2. SUNDRIES_SETTINGS environment variable (if set)
    3. Default: 'settings.sundries.yaml' in the current directory

    An explicit or environment-provided path must exist. When the default
    file is absent, settings come from the environment and field defaults.

    Args:
        config_path: Optional explicit path to the configuration file.

    Returns:
        SundriesSettings populated from the YAML file and environment.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
        yaml.YAMLError: If the YAML file is malformed.
        pydantic.ValidationError: If the configuration fails validation.
    """
    explicit = config_path is not None
    if config_path is None:
        env_path = os.environ.get("SUNDRIES_SETTINGS")
        explicit = bool(env_path)
        config_path = Path(env_path) if env_path else Path(DEFAULT_SETTINGS_FILE)

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found at {config_path}")
        return SundriesSettings()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return SundriesSettings(**data)
