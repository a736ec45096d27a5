from constructs import Construct

from helper.config import Config
from stacks.common.base import ServiceStack
from stacks.common.mixins import AutoScalingSettings
from stacks.common.constants import (
    CRYSTAL_URL,
    FRONTEND_CONSTRUCT_ID,
    FRONTEND_CPU,
    FRONTEND_DESIRED_COUNT,
    FRONTEND_IMAGE,
    FRONTEND_MEMORY,
    FRONTEND_PORT,
    FRONTEND_PUBLIC_LOAD_BALANCER,
    FRONTEND_SERVICE_NAME,
    NODEJS_URL,
    SERVICE_MESH_PORT,
    SERVICE_MESH_RULE_NAME
)


class FrontendServiceStack(ServiceStack):
    """
    Frontend service of the ECS workshop, deployed into the shared platform.

    Declares a public, load-balanced Fargate service that calls the crystal
    and nodejs services through service discovery. The task role may describe
    subnets and the service may reach the shared services security group on
    the mesh port.

    Features:
    - Owned PlatformReference to the "<environment>-base" stack
    - Registration in the platform's service discovery namespace
    - Optional CPU autoscaling, off by default
    """

    def __init__(self,
                 scope: Construct,
                 construct_id: str,
                 config: Config,
                 **kwargs) -> None:
        kwargs.setdefault(
            'description',
            f"Frontend service for the {config.environment} ECS platform"
        )
        super().__init__(scope, construct_id, config, **kwargs)

        frontend = config.get_frontend_config()
        port = frontend.get('Port', FRONTEND_PORT)

        environment_vars = {
            "CRYSTAL_URL": frontend.get('CrystalUrl', CRYSTAL_URL),
            "NODEJS_URL": frontend.get('NodejsUrl', NODEJS_URL),
            # The platform lookup guarantees a concrete region here
            "REGION": self.region,
        }

        self.fargate_load_balanced_service = self.create_alb_fargate_service(
            construct_id=FRONTEND_CONSTRUCT_ID,
            service_name=frontend.get('ServiceName', FRONTEND_SERVICE_NAME),
            image=frontend.get('Image', FRONTEND_IMAGE),
            port=port,
            cpu=frontend.get('CPU', FRONTEND_CPU),
            memory=frontend.get('Memory', FRONTEND_MEMORY),
            desired_count=frontend.get('DesiredCount', FRONTEND_DESIRED_COUNT),
            environment_vars=environment_vars,
            public_load_balancer=frontend.get('PublicLoadBalancer', FRONTEND_PUBLIC_LOAD_BALANCER)
        )

        # Broad on purpose: subnet lookups have no resource-level scoping
        self.task_role_statement = self.add_subnet_discovery_permissions(
            self.fargate_load_balanced_service.task_definition
        )

        self.mesh_port = self.allow_service_to_security_group(
            self.fargate_load_balanced_service.service,
            self.platform.services_sec_grp,
            port=frontend.get('ServiceMeshPort', SERVICE_MESH_PORT),
            rule_name=SERVICE_MESH_RULE_NAME
        )

        self.auto_scale = self.configure_cpu_autoscaling(
            self.fargate_load_balanced_service.service,
            AutoScalingSettings.from_config(config.get_autoscaling_config())
        )

        self.add_common_tags(self)
