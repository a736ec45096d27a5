"""Security group mixin for CDK stacks."""

import logging
from typing import Optional

from aws_cdk import aws_ec2 as ec2, aws_ecs as ecs

from ..validators import ConfigValidator

logger = logging.getLogger(__name__)


class SecurityGroupMixin:
    """
    Mixin class providing security group rules between services.

    Services reach each other through a security group shared by the whole
    cluster instead of per-service rules.
    """

    def allow_service_to_security_group(self,
                                        service: ecs.BaseService,
                                        security_group: ec2.ISecurityGroup,
                                        port: int,
                                        rule_name: str,
                                        description: Optional[str] = None) -> ec2.Port:
        """
        Allow a service to open TCP connections to a security group on one port.

        Adds an ingress rule to ``security_group`` with the service's security
        group as source, and the matching egress rule when the service does
        not already allow all outbound traffic.

        Args:
            service: The ECS service initiating connections
            security_group: Target security group, possibly imported by id
            port: The single TCP port to open
            rule_name: String representation of the port, used in rule ids
            description: Optional rule description

        Returns:
            The port range that was opened
        """
        ConfigValidator.validate_port_range(port)

        connection = ec2.Port(
            protocol=ec2.Protocol.TCP,
            string_representation=rule_name,
            from_port=port,
            to_port=port
        )
        service.connections.allow_to(security_group, connection, description)
        logger.info("Allowed service to reach shared security group on tcp/%d", port)
        return connection
