"""
Base Settings

Dataclass-based settings schema with validation.

Features:
- Dataclass schema with defaults for every field
- Backwards-compatible loading (missing keys use defaults, unknown keys are dropped)
- Field validation via ``validated_field()`` metadata and ValidationResult

Usage:
    @dataclass
    class MySettings(BaseSettings):
        zoom: float = validated_field(1.0, min_value=0.5, max_value=2.0)

    settings = MySettings.from_dict({"zoom": 3.0})
    result = settings.validate()   # result.valid is False
"""
from dataclasses import dataclass, asdict, fields, field
from typing import Any, Callable, Dict, List, Optional, Union


# =============================================================================
# Validation Framework
# =============================================================================

@dataclass
class ValidationResult:
    """
    Result of validating settings.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
        warnings: List of warning messages (non-blocking issues)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str):
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult'):
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class FieldValidator:
    """
    Validation rules for a settings field.

    Use through ``validated_field()``.
    """
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    # Exclusive lower bound, for values that must be strictly positive
    greater_than: Optional[Union[int, float]] = None
    choices: Optional[List[Any]] = None
    allow_none: bool = True
    # Signature: (value, field_name) -> Optional[str] (error message or None)
    custom: Optional[Callable[[Any, str], Optional[str]]] = None

    def validate(self, value: Any, field_name: str) -> ValidationResult:
        """
        Validate a value against this validator's rules.

        Args:
            value: The value to validate
            field_name: Name of the field (for error messages)

        Returns:
            ValidationResult with any errors
        """
        result = ValidationResult()

        if value is None:
            if not self.allow_none:
                result.add_error(f"{field_name}: Cannot be None")
            return result

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.min_value is not None and value < self.min_value:
                result.add_error(f"{field_name}: Value {value} is below minimum {self.min_value}")
            if self.max_value is not None and value > self.max_value:
                result.add_error(f"{field_name}: Value {value} is above maximum {self.max_value}")
            if self.greater_than is not None and value <= self.greater_than:
                result.add_error(f"{field_name}: Value {value} must be greater than {self.greater_than}")

        if self.choices is not None and value not in self.choices:
            result.add_error(f"{field_name}: Value '{value}' not in allowed choices: {self.choices}")

        if self.custom is not None:
            error = self.custom(value, field_name)
            if error:
                result.add_error(error)

        return result


def validated_field(
    default: Any = None,
    *,
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    greater_than: Optional[Union[int, float]] = None,
    choices: Optional[List[Any]] = None,
    allow_none: bool = True,
    custom: Optional[Callable[[Any, str], Optional[str]]] = None,
    **kwargs
):
    """
    Create a dataclass field with validation metadata.

    Example:
        @dataclass
        class MySettings(BaseSettings):
            lane_height: int = validated_field(60, min_value=20, max_value=200)
    """
    validator = FieldValidator(
        min_value=min_value,
        max_value=max_value,
        greater_than=greater_than,
        choices=choices,
        allow_none=allow_none,
        custom=custom,
    )

    metadata = kwargs.pop('metadata', {})
    metadata['validator'] = validator

    return field(default=default, metadata=metadata, **kwargs)


@dataclass
class BaseSettings:
    """
    Base class for all settings dataclasses.

    Subclasses define fields with default values so older stored settings
    keep loading when new fields are added.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseSettings':
        """
        Create settings from dictionary.

        Handles missing keys by using defaults and ignores unknown keys.
        """
        valid_keys = {f.name for f in fields(cls)}
        merged = asdict(cls())
        merged.update({k: v for k, v in data.items() if k in valid_keys})
        return cls(**merged)

    def validate(self) -> ValidationResult:
        """
        Validate all settings fields against their validators.

        Fields without validators are skipped (assumed valid).
        """
        result = ValidationResult()
        for f in fields(self):
            validator = f.metadata.get('validator') if f.metadata else None
            if isinstance(validator, FieldValidator):
                result.merge(validator.validate(getattr(self, f.name), f.name))
        return result

    def validate_field(self, field_name: str) -> ValidationResult:
        """
        Validate a single field by name.

        Raises:
            AttributeError: If field doesn't exist
        """
        for f in fields(self):
            if f.name == field_name:
                validator = f.metadata.get('validator') if f.metadata else None
                if isinstance(validator, FieldValidator):
                    return validator.validate(getattr(self, field_name), field_name)
                return ValidationResult()

        raise AttributeError(f"Field '{field_name}' not found in {self.__class__.__name__}")

    def is_valid(self) -> bool:
        """Quick check if settings are valid."""
        return self.validate().valid
