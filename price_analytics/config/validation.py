"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility category boundaries."""
        errors = []

        for name in ("medium_threshold", "high_threshold"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        medium = params.get("medium_threshold")
        high = params.get("high_threshold")
        if _is_number(medium) and _is_number(high) and medium > high:
            errors.append(ValidationError(
                field="high_threshold",
                message="Must not be below medium_threshold",
                value=high
            ))

        return errors

    @staticmethod
    def validate_risk_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate risk scoring parameters."""
        errors = []

        # Thresholds compared against volatility, correlation and range ratio
        for name in ("high_volatility_threshold", "moderate_volatility_threshold",
                     "wide_range_ratio"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        if "strong_trend_threshold" in params:
            value = params["strong_trend_threshold"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="strong_trend_threshold",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        # Integer-valued scoring terms
        for name in ("high_volatility_points", "moderate_volatility_points",
                     "strong_trend_points", "reversal_points", "wide_range_points",
                     "max_inflection_points", "low_risk_cutoff", "medium_risk_cutoff"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        moderate = params.get("moderate_volatility_threshold")
        high = params.get("high_volatility_threshold")
        if _is_number(moderate) and _is_number(high) and moderate > high:
            errors.append(ValidationError(
                field="high_volatility_threshold",
                message="Must not be below moderate_volatility_threshold",
                value=high
            ))

        low_cutoff = params.get("low_risk_cutoff")
        medium_cutoff = params.get("medium_risk_cutoff")
        if isinstance(low_cutoff, int) and isinstance(medium_cutoff, int) and low_cutoff > medium_cutoff:
            errors.append(ValidationError(
                field="medium_risk_cutoff",
                message="Must not be below low_risk_cutoff",
                value=medium_cutoff
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("volatility", ConfigValidator.validate_volatility_params),
            ("risk", ConfigValidator.validate_risk_params),
        )
        for name, validate in sections:
            if name not in config:
                continue
            section = config[name]
            if not isinstance(section, dict):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a mapping",
                    value=section
                ))
                continue
            errors.extend(validate(section))

        return errors
