"""
Base classes and common patterns for CDK stacks.

BaseStack carries the configuration and tagging every stack shares.
ServiceStack adds an owned reference to the shared platform and the
declaration of load-balanced Fargate services inside it.
"""

import logging
from typing import Any, Dict, Optional

import aws_cdk as cdk
from aws_cdk import (
    aws_ecs as ecs,
    aws_ecs_patterns as ecs_patterns,
    Stack
)
from constructs import Construct

from helper.config import Config
from stacks.platform.construct import PlatformReference
from .constants import PLATFORM_CONSTRUCT_ID
from .exceptions import StackConfigurationError, ResourceCreationError
from .validators import ConfigValidator, AWSResourceValidator
from .mixins import IAMPolicyMixin, SecurityGroupMixin, AutoScalingMixin

logger = logging.getLogger(__name__)


class BaseStack(Stack):
    """
    Base stack class with configuration access and validation.

    This class provides:
    - Configuration validation
    - Required/optional configuration lookups
    - Common tags
    """

    def __init__(self,
                 scope: Construct,
                 construct_id: str,
                 config: Config,
                 **kwargs) -> None:
        """
        Initialize the base stack.

        Args:
            scope: CDK scope
            construct_id: Unique identifier for this construct
            config: Configuration object
            **kwargs: Additional keyword arguments for Stack

        Raises:
            StackConfigurationError: If configuration is invalid
        """
        super().__init__(scope, construct_id, **kwargs)
        self.config = config
        self._validate_config()

    def _validate_config(self) -> None:
        if not isinstance(self.config, Config):
            raise StackConfigurationError(
                "Configuration must be a Config instance",
                config_key="config"
            )

    def get_required_config(self, key: str) -> Any:
        """
        Get a required configuration value.

        Args:
            key: Configuration key to retrieve

        Returns:
            The configuration value

        Raises:
            StackConfigurationError: If key is missing or empty
        """
        try:
            value = self.config.get(key)
        except KeyError:
            value = None
        if value is None:
            raise StackConfigurationError(
                f"Required configuration key '{key}' is missing",
                config_key=key
            )
        return value

    def get_optional_config(self, key: str, default_value: Any = None) -> Any:
        try:
            value = self.config.get(key)
        except KeyError:
            return default_value
        return default_value if value is None else value

    def add_common_tags(self, resource: Any, additional_tags: Dict[str, str] = None) -> None:
        """
        Add common tags to a resource and everything below it.

        Args:
            resource: The construct to tag
            additional_tags: Additional tags to add
        """
        common_tags = {
            "Environment": self.config.environment,
            "Project": self.get_optional_config("ProjectName", "default-project"),
            "ManagedBy": "CDK"
        }
        common_tags.update(self.config.get_tags())

        if additional_tags:
            common_tags.update(additional_tags)

        for key, value in common_tags.items():
            cdk.Tags.of(resource).add(key, str(value))


class ServiceStack(BaseStack, IAMPolicyMixin, SecurityGroupMixin, AutoScalingMixin):
    """
    Base class for services deployed into the shared platform.

    Each ServiceStack resolves its own PlatformReference before anything
    else is declared; a failed lookup aborts the stack.
    """

    def __init__(self,
                 scope: Construct,
                 construct_id: str,
                 config: Config,
                 **kwargs) -> None:
        super().__init__(scope, construct_id, config, **kwargs)

        try:
            self.platform = PlatformReference(self, PLATFORM_CONSTRUCT_ID, config=config)
        except StackConfigurationError:
            raise
        except Exception as e:
            raise ResourceCreationError(
                f"Failed to resolve platform for environment '{config.environment}': {str(e)}",
                resource_type="PlatformReference"
            ) from e

        AWSResourceValidator.validate_platform_reference(self.platform)

    def create_alb_fargate_service(self,
                                   construct_id: str,
                                   service_name: str,
                                   image: str,
                                   port: int,
                                   cpu: int = 256,
                                   memory: int = 512,
                                   desired_count: int = 1,
                                   environment_vars: Optional[Dict[str, str]] = None,
                                   public_load_balancer: bool = True
                                   ) -> ecs_patterns.ApplicationLoadBalancedFargateService:
        """
        Declare a load-balanced Fargate service in the platform cluster.

        The service is registered in the platform's service discovery
        namespace under ``service_name``.

        Args:
            construct_id: Construct id of the service within this stack
            service_name: ECS service name and service discovery name
            image: Container image reference in a public registry
            port: Container port, also the load balancer target port
            cpu: CPU units (1024 = 1 vCPU)
            memory: Memory in MiB
            desired_count: Number of tasks to run
            environment_vars: Environment variables for the container
            public_load_balancer: Whether the load balancer is internet facing

        Returns:
            The declared ApplicationLoadBalancedFargateService

        Raises:
            ResourceCreationError: If service declaration fails
        """
        try:
            ConfigValidator.validate_resource_name(service_name)
            ConfigValidator.validate_port_range(port)
            ConfigValidator.validate_environment_vars(environment_vars)

            task_image_options = ecs_patterns.ApplicationLoadBalancedTaskImageOptions(
                image=ecs.ContainerImage.from_registry(image),
                container_port=port,
                environment=dict(environment_vars or {})
            )

            service = ecs_patterns.ApplicationLoadBalancedFargateService(
                self,
                construct_id,
                service_name=service_name,
                cluster=self.platform.ecs_cluster,
                cpu=cpu,
                memory_limit_mib=memory,
                desired_count=desired_count,
                public_load_balancer=public_load_balancer,
                cloud_map_options=ecs.CloudMapOptions(
                    cloud_map_namespace=self.platform.sd_namespace,
                    name=service_name
                ),
                task_image_options=task_image_options
            )

            self.add_common_tags(service, {
                "ServiceName": service_name,
                "ServiceType": "Fargate"
            })
            logger.info("Declared Fargate service '%s' on port %d", service_name, port)

            return service

        except Exception as e:
            raise ResourceCreationError(
                f"Failed to create Fargate service '{service_name}': {str(e)}",
                resource_type="FargateService"
            ) from e
