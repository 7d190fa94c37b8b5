"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import AnalyticsConfig, RiskParams, VolatilityParams, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: AnalyticsConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_commodity_config(self, commodity: str) -> dict[str, Any]:
        """Load commodity-specific overrides from commodities.yaml."""
        commodities_file = self.config_dir / "commodities.yaml"

        if not commodity or not commodities_file.exists():
            return {}

        with open(commodities_file) as f:
            commodities_config = yaml.safe_load(f) or {}

        commodities = commodities_config.get("commodities") or {}

        # Commodity names are matched case-insensitively ("Wheat" == "wheat")
        for name, overrides in commodities.items():
            if str(name).lower() == commodity.lower():
                if overrides is not None and not isinstance(overrides, dict):
                    raise ConfigurationError(
                        f"Overrides for {name} in {commodities_file} must be a mapping",
                        errors=[f"{name}: Must be a mapping (got: {overrides!r})"],
                        commodity=commodity,
                    )
                return overrides or {}
        return {}

    def merge_config(
        self,
        commodity: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Commodity-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        commodity_config = self.load_commodity_config(commodity)
        config = self._deep_merge(config, commodity_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> AnalyticsConfig:
    """
    Build an AnalyticsConfig from a merged configuration dict.

    Unknown keys are ignored; missing sections fall back to defaults.
    """
    return AnalyticsConfig(
        volatility=_build_section(VolatilityParams, config.get("volatility")),
        risk=_build_section(RiskParams, config.get("risk")),
    )


def _build_section(params_cls: type, section: Optional[dict[str, Any]]) -> Any:
    if not section:
        return params_cls()
    known = {f.name for f in fields(params_cls)}
    return params_cls(**{k: v for k, v in section.items() if k in known})
