"""Mixin classes for CDK stacks."""

from .iam import IAMPolicyMixin
from .security import SecurityGroupMixin
from .autoscaling import AutoScalingMixin, AutoScalingSettings

__all__ = [
    "IAMPolicyMixin",
    "SecurityGroupMixin",
    "AutoScalingMixin",
    "AutoScalingSettings"
]
