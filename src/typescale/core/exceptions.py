"""Custom exceptions for the typography configuration engine."""

from typing import Any


class TypeScaleError(Exception):
    """Base exception for all typescale errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(TypeScaleError):
    """Exception raised for input validation errors."""


class ConfigurationError(TypeScaleError):
    """Exception raised for configuration errors."""


class StateError(TypeScaleError):
    """Exception raised when a reducer action cannot be interpreted."""


class HostError(TypeScaleError):
    """Exception raised for failures reported by the host bridge."""


# Specific exception classes for TRY003 compliance
class UnknownConfigFieldError(StateError):
    """Exception raised when a partial config update names an unknown field."""

    def __init__(self, field_name: str):
        super().__init__(f"Unknown typography config field: {field_name}")


class InvalidConfigValueError(StateError):
    """Exception raised when a partial config update carries values of the wrong type."""

    def __init__(self, fields: list[str]):
        super().__init__(f"Invalid typography config values: {', '.join(fields)}")


class UnknownPopoverError(StateError):
    """Exception raised for popover keys other than fonts, styles and ratio."""

    def __init__(self, key: str):
        super().__init__(f"Unknown popover: {key}")


class UnsupportedActionError(StateError):
    """Exception raised when the reducer receives an unknown action."""

    def __init__(self, action: object):
        super().__init__(f"Unsupported action: {type(action).__name__}")


class MissingScaleRatioError(ValidationError):
    """Exception raised when an auto scale is requested without a ratio."""

    def __init__(self):
        super().__init__("Scale ratio is required for an auto scale")


class InvalidStepCountError(ValidationError):
    """Exception raised for a negative number of scale steps."""

    def __init__(self, steps: int):
        super().__init__(f"Step count cannot be negative: {steps}")


class InvalidConfigurationError(ValidationError):
    """Exception raised when an invalid configuration is handed off."""

    def __init__(self, errors: dict[str, str]):
        fields = ", ".join(sorted(errors))
        super().__init__(f"Typography configuration is invalid: {fields}", details=errors)


class MissingFontFamilyError(ValidationError):
    """Exception raised when no font family can be determined for a plan."""

    def __init__(self):
        super().__init__("Font family and styles are required for type-based typography")


class MissingVariableIdError(ValidationError):
    """Exception raised when a variable-sourced config has no variable id."""

    def __init__(self):
        super().__init__("Variable ID is required for variable-based typography")


class MissingManualSizesError(ValidationError):
    """Exception raised when a manual scale has no entries."""

    def __init__(self):
        super().__init__("Manual sizes are required for manual scale")


class UnsupportedVariableTypeError(ValidationError):
    """Exception raised when a font-family binding is not a STRING variable."""

    def __init__(self, resolved_type: str):
        super().__init__(
            "Variable-based typography requires string variables containing a font family, "
            f"got {resolved_type}"
        )


class InvertedBoundsError(ValueError):
    """Exception raised when a validation range has min >= max."""

    def __init__(self, name: str):
        super().__init__(f"{name} minimum must be lower than its maximum")


class NonPositiveSizeError(ValueError):
    """Exception raised for non-positive size values in settings."""

    def __init__(self):
        super().__init__("size must be greater than zero")


class ApplyRejectedError(HostError):
    """Exception raised when the host rejects a typography system."""

    def __init__(self, style_name: str, message: str):
        super().__init__(f'Failed to create "{style_name}": {message}')


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class VariableNotFoundError(HostError):
    """Exception raised when a bound variable id is unknown to the host."""

    def __init__(self, variable_id: str):
        super().__init__(f"Typography variable not found: {variable_id}")


class UnavailableStylesError(HostError):
    """Exception raised when requested styles are missing from a font family."""

    def __init__(self, styles: list[str]):
        super().__init__(f"Font styles not available: {', '.join(styles)}")
