"""
Exception hierarchy for the configuration resolution engine.

Provides layered exception structure for naming and configuration errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the engine
"""

from typing import Any


class ConfigurationEngineError(Exception):
    """Base exception for all resolution engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NamingError(ConfigurationEngineError):
    """Base exception for resource name generation errors."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize naming error.

        Args:
            message: Error message
            name: Candidate name that failed
            details: Additional context
        """
        details = details or {}
        if name:
            details["name"] = name
        self.name = name
        super().__init__(message, details)


class NameTooLongError(NamingError):
    """Raised when a candidate name exceeds its resource class limit."""

    def __init__(self, name: str, resource_class: str, max_length: int) -> None:
        """
        Initialize name too long error.

        Args:
            name: Candidate name
            resource_class: Resource class the name was generated for
            max_length: Maximum length for the resource class
        """
        self.resource_class = resource_class
        self.max_length = max_length
        super().__init__(
            f"Base name '{name}' exceeds maximum length of {max_length} "
            f"characters for {resource_class}",
            name,
            {"resource_class": resource_class, "length": len(name), "max_length": max_length},
        )


class NamingConflictError(NamingError):
    """Raised when a name collides and the strategy forbids renaming."""

    def __init__(self, name: str) -> None:
        """
        Initialize naming conflict error.

        Args:
            name: Candidate name that is already claimed
        """
        super().__init__(
            f"Naming conflict detected for '{name}' and collision resolution is set to ERROR",
            name,
        )


class UnresolvableCollisionError(NamingError):
    """Raised when no unique name is found within the attempt limit."""

    def __init__(self, name: str, attempts: int) -> None:
        """
        Initialize unresolvable collision error.

        Args:
            name: Candidate name that could not be made unique
            attempts: Number of alternatives tried
        """
        self.attempts = attempts
        super().__init__(
            f"Unable to generate unique name for '{name}' after {attempts} attempts",
            name,
            {"attempts": attempts},
        )


class InvalidGeneratedNameError(NamingError):
    """Raised when a generated name set fails its cross-check."""

    def __init__(self, errors: list[str]) -> None:
        """
        Initialize invalid generated name error.

        Args:
            errors: Cross-check errors for the generated name set
        """
        self.errors = list(errors)
        super().__init__(f"Resource name validation failed: {', '.join(errors)}")


class ConfigurationInvalidError(ConfigurationEngineError):
    """Raised when a merged configuration has validation errors."""

    def __init__(
        self,
        stage: str,
        errors: list[str],
        warnings: list[str] | None = None,
    ) -> None:
        """
        Initialize configuration invalid error.

        Args:
            stage: Stage that failed to resolve
            errors: Every validation error found
            warnings: Validation warnings reported alongside the errors
        """
        self.stage = stage
        self.errors = list(errors)
        self.warnings = list(warnings or [])
        super().__init__(
            f"Configuration validation failed for stage '{stage}': {', '.join(errors)}"
        )


class UnknownStageError(ConfigurationEngineError):
    """Raised for a stage without overrides when fallback is disabled."""

    def __init__(self, stage: str, available: list[str]) -> None:
        """
        Initialize unknown stage error.

        Args:
            stage: Stage without an override record
            available: Stages that do have override records
        """
        self.stage = stage
        self.available = list(available)
        super().__init__(
            f"No environment configuration found for stage '{stage}'",
            {"available_stages": self.available},
        )
