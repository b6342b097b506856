"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from ..merge import merge
from .defaults import DefaultConfig, LoggingParams, PercentageParams, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

SETTINGS_FILENAME = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings_file(self) -> dict[str, Any]:
        """Load overrides from the settings file, empty if it does not exist."""
        settings_file = self.config_dir / SETTINGS_FILENAME

        if not settings_file.exists():
            logger.info("settings_file_missing", path=str(settings_file))
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f) or {}

        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"{settings_file} must contain a mapping at the top level",
                context={"path": str(settings_file)},
            )

        logger.debug("settings_file_loaded", path=str(settings_file), sections=sorted(settings))
        return settings

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Settings file overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)
        config = merge(config, self.load_settings_file())

        if overrides:
            config = merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Load and validate the merged configuration.

        Raises:
            ConfigurationError: If any merged value fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(f"{e.field}: {e.message}" for e in errors),
                errors=errors,
                context={"config_dir": str(self.config_dir)},
            )

        return DefaultConfig(
            percentages=PercentageParams(**self._known_fields(PercentageParams, config["percentages"])),
            logging=LoggingParams(**self._known_fields(LoggingParams, config["logging"])),
        )

    def load_params(self, overrides: Optional[dict[str, Any]] = None) -> PercentageParams:
        """Load the validated percentage parameters."""
        return self.load_config(overrides).percentages

    def _known_fields(self, params_cls: type, values: dict[str, Any]) -> dict[str, Any]:
        """Drop keys that are not fields of ``params_cls``."""
        unknown = set(values) - set(params_cls.__dataclass_fields__)
        if unknown:
            logger.warning("unknown_settings_ignored", section=params_cls.__name__, keys=sorted(unknown))
        return {name: value for name, value in values.items() if name in params_cls.__dataclass_fields__}
