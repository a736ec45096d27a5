"""
CDK stack modules for the ECS workshop frontend.

- common: base stacks, mixins, exceptions, validators and constants
- platform: read-only references to the base platform stack
- frontend: the frontend service stack
"""

# common must load before platform: the base stack module imports the platform construct
from .common import (
    BaseStack,
    ServiceStack,
    IAMPolicyMixin,
    SecurityGroupMixin,
    AutoScalingMixin,
    AutoScalingSettings,
    StackError,
    StackConfigurationError,
    ResourceCreationError,
    ValidationError,
    ConfigValidator,
    AWSResourceValidator
)
from .platform import PlatformReference
from .frontend.stack import FrontendServiceStack

__all__ = [
    # Stack classes
    "FrontendServiceStack",

    # Constructs
    "PlatformReference",

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
