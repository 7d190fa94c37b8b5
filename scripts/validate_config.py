#!/usr/bin/env python3
"""Configuration validation script for commodities.yaml."""

import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from price_analytics.config.loader import ConfigLoader
from price_analytics.config.validation import ConfigValidator, ValidationError


def validate_commodity_config(loader: ConfigLoader, commodity: str) -> list[ValidationError]:
    """Validate merged configuration for a specific commodity."""
    config = loader.merge_config(commodity)
    return ConfigValidator.validate_config(config)


def configured_commodities(loader: ConfigLoader) -> list[str]:
    """Commodity names with overrides in commodities.yaml."""
    commodities_file = loader.config_dir / "commodities.yaml"
    if not commodities_file.exists():
        return []
    with open(commodities_file) as f:
        data = yaml.safe_load(f) or {}
    return [str(name) for name in (data.get("commodities") or {})]


def main() -> int:
    """Main validation function."""
    loader = ConfigLoader.create(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
    print(f"Validating analytics configuration in {loader.config_dir}")

    # Empty name validates the global defaults
    commodities = [""] + configured_commodities(loader)
    all_valid = True

    for commodity in commodities:
        label = commodity or "defaults"
        errors = validate_commodity_config(loader, commodity)

        if errors:
            print(f"FAIL {label}: {len(errors)} validation errors")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"OK   {label}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
