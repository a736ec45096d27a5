"""Validation utilities for CDK stacks."""

import re
from typing import Any, Dict, List, Optional

import aws_cdk as cdk
from aws_cdk import aws_ec2 as ec2

from .exceptions import StackConfigurationError, ValidationError


class ConfigValidator:
    """Utility class for validating configuration parameters."""

    @staticmethod
    def validate_required_config(config: Dict[str, Any],
                                 required_keys: List[str]) -> None:
        """
        Validate that all required configuration keys are present and non-empty.

        Args:
            config: Configuration dictionary to validate
            required_keys: List of required configuration keys

        Raises:
            ValidationError: If any required key is missing or empty
        """
        missing_keys = [key for key in required_keys if not config.get(key)]
        if missing_keys:
            raise ValidationError(
                f"Missing required configuration keys: {', '.join(missing_keys)}",
                parameter_name="config",
                provided_value=str(list(config.keys()))
            )

    @staticmethod
    def validate_port_range(port: int) -> None:
        """
        Validate that port number is within valid range.

        Args:
            port: Port number to validate

        Raises:
            ValidationError: If port is outside valid range
        """
        if isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535:
            raise ValidationError(
                f"Port must be an integer between 1 and 65535, got {port}",
                parameter_name="port",
                provided_value=str(port)
            )

    @staticmethod
    def validate_resource_name(name: str, max_length: int = 255) -> None:
        """
        Validate an ECS service or construct name.

        Args:
            name: Resource name to validate
            max_length: Maximum allowed length

        Raises:
            ValidationError: If name format is invalid
        """
        # Skip validation for CDK tokens (CloudFormation references)
        if isinstance(name, str) and cdk.Token.is_unresolved(name):
            return

        if not name:
            raise ValidationError(
                "Resource name cannot be empty",
                parameter_name="name",
                provided_value=name
            )

        if len(name) > max_length:
            raise ValidationError(
                f"Resource name too long (max {max_length}): {name}",
                parameter_name="name",
                provided_value=name
            )

        if not re.match(r'^[a-zA-Z0-9-_]+$', name):
            raise ValidationError(
                f"Invalid resource name format: {name}. "
                f"Only alphanumeric characters, hyphens, and underscores allowed",
                parameter_name="name",
                provided_value=name
            )

    @staticmethod
    def validate_environment_vars(env_vars: Optional[Dict[str, str]]) -> None:
        """
        Validate container environment variables.

        Args:
            env_vars: Environment variables to validate

        Raises:
            ValidationError: If environment variables are invalid
        """
        if env_vars is None:
            return

        if not isinstance(env_vars, dict):
            raise ValidationError(
                "Environment variables must be a dictionary",
                parameter_name="environment_vars",
                provided_value=str(type(env_vars))
            )

        for key, value in env_vars.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValidationError(
                    f"Environment variable key and value must be strings: {key}={value}",
                    parameter_name="environment_vars",
                    provided_value=f"{key}={value}"
                )

    @staticmethod
    def validate_capacity(min_capacity: int, max_capacity: int) -> None:
        if min_capacity < 1:
            raise ValidationError(
                f"Minimum capacity must be at least 1, got {min_capacity}",
                parameter_name="min_capacity",
                provided_value=str(min_capacity)
            )
        if max_capacity < min_capacity:
            raise ValidationError(
                f"Maximum capacity {max_capacity} is below minimum capacity {min_capacity}",
                parameter_name="max_capacity",
                provided_value=str(max_capacity)
            )

    @staticmethod
    def validate_percentage(value: float, parameter_name: str = "percentage") -> None:
        if not 0 < value <= 100:
            raise ValidationError(
                f"{parameter_name} must be greater than 0 and at most 100, got {value}",
                parameter_name=parameter_name,
                provided_value=str(value)
            )


class AWSResourceValidator:
    """Utility class for validating AWS resource handles."""

    PLATFORM_HANDLES = ("vpc", "sd_namespace", "ecs_cluster", "services_sec_grp")

    @staticmethod
    def validate_vpc(vpc: ec2.IVpc) -> None:
        """
        Validate VPC resource.

        Args:
            vpc: VPC to validate (created or looked up)

        Raises:
            ValidationError: If VPC is invalid
        """
        # IVpc is a Protocol and can't be used with isinstance()
        if vpc is None or not hasattr(vpc, 'vpc_id'):
            raise ValidationError(
                f"Expected VPC instance with vpc_id attribute, got {type(vpc)}",
                parameter_name="vpc",
                provided_value=str(type(vpc))
            )

    @classmethod
    def validate_platform_reference(cls, platform: Any) -> None:
        """
        Validate that every platform handle has been resolved.

        Services are declared against the platform's cluster, VPC and
        namespace, so none of them may be missing.

        Args:
            platform: A PlatformReference (or anything exposing its handles)

        Raises:
            ValidationError: If the platform or any of its handles is missing
        """
        if platform is None:
            raise ValidationError(
                "Platform reference is required before declaring services",
                parameter_name="platform",
                provided_value="None"
            )

        missing = [name for name in cls.PLATFORM_HANDLES
                   if getattr(platform, name, None) is None]
        if missing:
            raise ValidationError(
                f"Platform reference is not fully resolved, missing: {', '.join(missing)}",
                parameter_name="platform",
                provided_value=str(missing)
            )

        cls.validate_vpc(platform.vpc)

    @staticmethod
    def validate_concrete_environment(stack: cdk.Stack) -> None:
        """
        Validate that a stack has a concrete account and region.

        Context lookups (such as finding a VPC by name) cannot run against
        an environment-agnostic stack.

        Args:
            stack: The stack that will perform the lookup

        Raises:
            StackConfigurationError: If account or region is unresolved
        """
        unresolved = [name for name, value in (("account", stack.account), ("region", stack.region))
                      if cdk.Token.is_unresolved(value)]
        if unresolved:
            raise StackConfigurationError(
                f"Stack '{stack.stack_name}' needs an explicit {' and '.join(unresolved)} "
                f"to look up platform resources; set AWS_ACCOUNT_ID or CDK_DEFAULT_ACCOUNT "
                f"and AWS_DEFAULT_REGION or CDK_DEFAULT_REGION",
                config_key="env"
            )
