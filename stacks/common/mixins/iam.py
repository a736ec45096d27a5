"""IAM policy mixin for CDK stacks."""

import logging
from typing import List

from aws_cdk import aws_ecs as ecs, aws_iam as iam

from ..constants import SUBNET_DISCOVERY_ACTIONS

logger = logging.getLogger(__name__)


class IAMPolicyMixin:
    """
    Mixin class providing task role permission helpers.

    Statements land on the task role, the identity the application
    containers run as. The execution role is managed by the ECS patterns.
    """

    def add_task_role_statement(self,
                                task_definition: ecs.TaskDefinition,
                                actions: List[str],
                                resources: List[str]) -> iam.PolicyStatement:
        """
        Add an allow statement to the task role of a task definition.

        Args:
            task_definition: Task definition whose task role receives the statement
            actions: IAM actions to allow
            resources: Resource ARNs the actions apply to

        Returns:
            The statement that was added
        """
        if not actions:
            raise ValueError("At least one IAM action is required")
        if not resources:
            raise ValueError("At least one resource is required, use ['*'] for all resources")

        statement = iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=list(actions),
            resources=list(resources)
        )
        task_definition.add_to_task_role_policy(statement)
        logger.info("Granted %s on %s to the task role", ", ".join(actions), ", ".join(resources))
        return statement

    def add_subnet_discovery_permissions(self,
                                         task_definition: ecs.TaskDefinition) -> iam.PolicyStatement:
        """
        Allow the application to describe subnets.

        ec2:DescribeSubnets does not support resource-level permissions,
        so the statement applies to all resources.
        """
        return self.add_task_role_statement(task_definition, SUBNET_DISCOVERY_ACTIONS, ["*"])
