"""
Autoscaling mixin for CDK stacks.

CPU target tracking for ECS services. Attached only when the
AutoScaling section of the configuration enables it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from aws_cdk import Duration, aws_ecs as ecs

from ..constants import (
    CPU_SCALING_POLICY_ID,
    DEFAULT_AUTOSCALING_ENABLED,
    DEFAULT_CPU_TARGET_PERCENT,
    DEFAULT_MAX_CAPACITY,
    DEFAULT_MIN_CAPACITY,
    DEFAULT_SCALE_IN_COOLDOWN,
    DEFAULT_SCALE_OUT_COOLDOWN
)
from ..validators import ConfigValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoScalingSettings:
    """Task count bounds and CPU trigger for a service."""
    enabled: bool = DEFAULT_AUTOSCALING_ENABLED
    min_capacity: int = DEFAULT_MIN_CAPACITY
    max_capacity: int = DEFAULT_MAX_CAPACITY
    cpu_target_percent: int = DEFAULT_CPU_TARGET_PERCENT
    scale_in_cooldown_seconds: int = DEFAULT_SCALE_IN_COOLDOWN
    scale_out_cooldown_seconds: int = DEFAULT_SCALE_OUT_COOLDOWN

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "AutoScalingSettings":
        """Build settings from the AutoScaling configuration section."""
        section = section or {}
        return cls(
            # Quoted YAML values arrive as strings, so "false" must stay off
            enabled=str(section.get('Enabled', DEFAULT_AUTOSCALING_ENABLED)).lower() == 'true',
            min_capacity=int(section.get('MinCapacity', DEFAULT_MIN_CAPACITY)),
            max_capacity=int(section.get('MaxCapacity', DEFAULT_MAX_CAPACITY)),
            cpu_target_percent=int(section.get('CpuTargetPercent', DEFAULT_CPU_TARGET_PERCENT)),
            scale_in_cooldown_seconds=int(section.get('ScaleInCooldownSeconds', DEFAULT_SCALE_IN_COOLDOWN)),
            scale_out_cooldown_seconds=int(section.get('ScaleOutCooldownSeconds', DEFAULT_SCALE_OUT_COOLDOWN)),
        )


class AutoScalingMixin:
    """Mixin class providing ECS service autoscaling."""

    def configure_cpu_autoscaling(self,
                                  service: ecs.BaseService,
                                  settings: AutoScalingSettings) -> Optional[ecs.ScalableTaskCount]:
        """
        Scale a service's task count on average CPU utilization.

        Args:
            service: The ECS service to scale
            settings: Bounds, target and cooldowns

        Returns:
            The scalable task count, or None when autoscaling is disabled
        """
        if not settings.enabled:
            logger.info("Autoscaling disabled, service keeps its fixed desired count")
            return None

        ConfigValidator.validate_capacity(settings.min_capacity, settings.max_capacity)
        ConfigValidator.validate_percentage(settings.cpu_target_percent, "cpu_target_percent")

        scalable_task_count = service.auto_scale_task_count(
            min_capacity=settings.min_capacity,
            max_capacity=settings.max_capacity
        )
        scalable_task_count.scale_on_cpu_utilization(
            CPU_SCALING_POLICY_ID,
            target_utilization_percent=settings.cpu_target_percent,
            scale_in_cooldown=Duration.seconds(settings.scale_in_cooldown_seconds),
            scale_out_cooldown=Duration.seconds(settings.scale_out_cooldown_seconds)
        )
        logger.info(
            "Autoscaling between %d and %d tasks at %d%% CPU",
            settings.min_capacity, settings.max_capacity, settings.cpu_target_percent
        )
        return scalable_task_count
