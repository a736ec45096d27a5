"""
Platform reference construct.

Resolves the network, service discovery namespace, ECS cluster and shared
security group created by the "<environment>-base" platform stack. Nothing
is created here: the VPC is found by name through a context lookup and the
other handles are built from values the platform stack exports.
"""

import logging

import aws_cdk as cdk
from aws_cdk import (
    aws_ec2 as ec2,
    aws_ecs as ecs,
    aws_servicediscovery as servicediscovery
)
from constructs import Construct

from helper.config import Config
from stacks.common.constants import (
    DEFAULT_PLATFORM_EXPORTS,
    PLATFORM_EXPORT_CLUSTER_NAME,
    PLATFORM_EXPORT_NAMESPACE_ARN,
    PLATFORM_EXPORT_NAMESPACE_ID,
    PLATFORM_EXPORT_NAMESPACE_NAME,
    PLATFORM_EXPORT_SERVICES_SECURITY_GROUP
)
from stacks.common.validators import AWSResourceValidator, ConfigValidator

logger = logging.getLogger(__name__)


class PlatformReference(Construct):
    """
    Read-only handles to the shared platform.

    Each service stack owns its own PlatformReference even though the
    underlying cloud resources are shared.

    Attributes:
        environment_name: Environment the platform was deployed for
        export_names: Export name per platform value
        vpc: The platform VPC
        sd_namespace: The private DNS namespace services register into
        ecs_cluster: The shared cluster, bound to ``vpc`` and ``sd_namespace``
        services_sec_grp: Security group shared by the services of the cluster
    """

    def __init__(self, scope: Construct, construct_id: str, config: Config) -> None:
        super().__init__(scope, construct_id)

        # A lookup by name needs a concrete account and region
        AWSResourceValidator.validate_concrete_environment(cdk.Stack.of(self))

        self.environment_name = config.environment
        self.export_names = {**DEFAULT_PLATFORM_EXPORTS, **config.get_platform_exports()}
        ConfigValidator.validate_required_config(self.export_names, list(DEFAULT_PLATFORM_EXPORTS))

        vpc_name = config.vpc_lookup_name()
        logger.info("Looking up platform VPC '%s'", vpc_name)
        self.vpc = ec2.Vpc.from_lookup(self, "VPC", vpc_name=vpc_name)

        # Name, ARN and id are imported together; the import either succeeds
        # as a whole at deploy time or the stack fails
        self.sd_namespace = servicediscovery.PrivateDnsNamespace.from_private_dns_namespace_attributes(
            self,
            "SDNamespace",
            namespace_name=self._import(PLATFORM_EXPORT_NAMESPACE_NAME),
            namespace_arn=self._import(PLATFORM_EXPORT_NAMESPACE_ARN),
            namespace_id=self._import(PLATFORM_EXPORT_NAMESPACE_ID)
        )

        # Security groups are attached per service, not at the cluster level
        self.ecs_cluster = ecs.Cluster.from_cluster_attributes(
            self,
            "ECSCluster",
            cluster_name=self._import(PLATFORM_EXPORT_CLUSTER_NAME),
            security_groups=[],
            vpc=self.vpc,
            default_cloud_map_namespace=self.sd_namespace
        )

        # The imported id is not checked here; deploy time will reject a bad group
        self.services_sec_grp = ec2.SecurityGroup.from_security_group_id(
            self,
            "ServicesSecGrp",
            self._import(PLATFORM_EXPORT_SERVICES_SECURITY_GROUP)
        )

    def _import(self, key: str) -> str:
        export_name = self.export_names[key]
        logger.info("Importing platform value %s from export '%s'", key, export_name)
        return cdk.Fn.import_value(export_name)
