"""Custom exceptions for CDK stacks."""

from typing import Optional


class StackError(Exception):
    """
    Base class for errors raised while declaring a stack.

    Every subclass is fatal: the stack is not synthesized.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class StackConfigurationError(StackError):
    """
    Raised when stack configuration is invalid or incomplete.

    Covers missing configuration keys and deployment environments that
    cannot support a context lookup (unresolved account or region).

    Attributes:
        message: Human-readable error description
        config_key: The configuration key that caused the error
    """

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        self.config_key = config_key
        super().__init__(message)


class ResourceCreationError(StackError):
    """
    Raised when a group of resources cannot be declared.

    Attributes:
        message: Human-readable error description
        resource_type: The resource group that failed, e.g. "FargateService"
    """

    def __init__(self, message: str, resource_type: Optional[str] = None) -> None:
        self.resource_type = resource_type
        super().__init__(message)


class ValidationError(StackError):
    """
    Raised when a parameter fails validation.

    Attributes:
        message: Human-readable error description
        parameter_name: The parameter that failed validation
        provided_value: The value that was provided, as a string
    """

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        provided_value: Optional[str] = None
    ) -> None:
        self.parameter_name = parameter_name
        self.provided_value = provided_value
        super().__init__(message)
