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


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_pattern_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pattern detection parameters."""
        errors = []

        if "min_pattern_length" in params:
            value = params["min_pattern_length"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="patterns.min_pattern_length",
                    message="Must be a positive integer",
                    value=value
                ))

        for name in ("dominance_ratio", "trend_ratio"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 1:
                    errors.append(ValidationError(
                        field=f"patterns.{name}",
                        message="Must be a number of at least 1",
                        value=value
                    ))

        if "dominance_confidence" in params:
            value = params["dominance_confidence"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="patterns.dominance_confidence",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        if "geometric_tolerance" in params:
            value = params["geometric_tolerance"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="patterns.geometric_tolerance",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_sample_params(section: str, params: dict[str, Any], multiplier_key: str) -> list[ValidationError]:
        """Validate anomaly or cluster parameters."""
        errors = []

        if "min_samples" in params:
            value = params["min_samples"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field=f"{section}.min_samples",
                    message="Must be a positive integer",
                    value=value
                ))

        if multiplier_key in params:
            value = params[multiplier_key]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field=f"{section}.{multiplier_key}",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_confidence_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate confidence scoring parameters."""
        errors = []

        for name in ("base_score", "size_bonus", "mixed_bonus", "unique_bonus", "file_bonus", "max_score"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=f"confidence.{name}",
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        if "size_threshold" in params:
            value = params["size_threshold"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="confidence.size_threshold",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_execution_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate concurrency parameters."""
        errors = []

        for name in ("parallel_number_theory", "parallel_labels"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"execution.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        if "max_workers" in params and not _is_positive_int(params["max_workers"]):
            errors.append(ValidationError(
                field="execution.max_workers",
                message="Must be a positive integer",
                value=params["max_workers"]
            ))

        return errors

    @staticmethod
    def validate_labeler_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate labeling collaborator parameters."""
        errors = []

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="labeler.enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        for name in ("endpoint", "model", "api_key_env"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=f"labeler.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "timeout_seconds" in params and not _is_positive_int(params["timeout_seconds"]):
            errors.append(ValidationError(
                field="labeler.timeout_seconds",
                message="Must be a positive integer",
                value=params["timeout_seconds"]
            ))

        return errors

    @staticmethod
    def validate_limits_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate request boundary limits."""
        errors = []

        for name in ("max_tokens", "max_string_length", "max_abs_number"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=f"limits.{name}",
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "patterns" in config:
            errors.extend(ConfigValidator.validate_pattern_params(config["patterns"]))

        if "anomalies" in config:
            errors.extend(ConfigValidator.validate_sample_params(
                "anomalies", config["anomalies"], "std_dev_multiplier"))

        if "clusters" in config:
            errors.extend(ConfigValidator.validate_sample_params(
                "clusters", config["clusters"], "gap_multiplier"))

        if "confidence" in config:
            errors.extend(ConfigValidator.validate_confidence_params(config["confidence"]))

        if "execution" in config:
            errors.extend(ConfigValidator.validate_execution_params(config["execution"]))

        if "labeler" in config:
            errors.extend(ConfigValidator.validate_labeler_params(config["labeler"]))

        if "limits" in config:
            errors.extend(ConfigValidator.validate_limits_params(config["limits"]))

        return errors
