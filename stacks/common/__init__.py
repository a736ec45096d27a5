"""
Common CDK stack components and utilities.

Base stacks, mixins, exceptions, validators and constants shared by the
service stacks.
"""

# Import base classes
from .base import BaseStack, ServiceStack

# Import mixins
from .mixins import (
    IAMPolicyMixin,
    SecurityGroupMixin,
    AutoScalingMixin,
    AutoScalingSettings
)

# Import exceptions
from .exceptions import (
    StackError,
    StackConfigurationError,
    ResourceCreationError,
    ValidationError
)

# Import validators
from .validators import (
    ConfigValidator,
    AWSResourceValidator
)

__all__ = [
    # Base classes
    "BaseStack",
    "ServiceStack",

    # Mixins
    "IAMPolicyMixin",
    "SecurityGroupMixin",
    "AutoScalingMixin",
    "AutoScalingSettings",

    # Exceptions
    "StackError",
    "StackConfigurationError",
    "ResourceCreationError",
    "ValidationError",

    # Validators
    "ConfigValidator",
    "AWSResourceValidator"
]
