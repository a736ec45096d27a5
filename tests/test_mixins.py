"""
Unit tests for the stack mixins that can be exercised without a service.
"""

import pytest
from unittest.mock import Mock

from stacks.common.exceptions import ValidationError
from stacks.common.mixins import (
    AutoScalingMixin,
    AutoScalingSettings,
    IAMPolicyMixin,
    SecurityGroupMixin
)


class TestAutoScalingSettings:
    """Test settings parsing from the AutoScaling section."""

    def test_defaults(self):
        settings = AutoScalingSettings.from_config(None)

        assert settings == AutoScalingSettings()
        assert settings.enabled is False
        assert (settings.min_capacity, settings.max_capacity) == (1, 10)
        assert settings.cpu_target_percent == 50
        assert settings.scale_in_cooldown_seconds == 30
        assert settings.scale_out_cooldown_seconds == 30

    def test_overrides(self):
        settings = AutoScalingSettings.from_config({
            "Enabled": True,
            "MaxCapacity": 4,
            "CpuTargetPercent": 70
        })

        assert settings.enabled is True
        assert settings.min_capacity == 1
        assert settings.max_capacity == 4
        assert settings.cpu_target_percent == 70

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("True", True),
        ("false", False),
        ("no", False),
    ])
    def test_enabled_flag_parsing(self, value, expected):
        settings = AutoScalingSettings.from_config({"Enabled": value})

        assert settings.enabled is expected

    def test_disabled_leaves_service_untouched(self):
        service = Mock()

        result = AutoScalingMixin().configure_cpu_autoscaling(service, AutoScalingSettings())

        assert result is None
        service.auto_scale_task_count.assert_not_called()

    def test_invalid_target_rejected(self):
        service = Mock()
        settings = AutoScalingSettings(enabled=True, cpu_target_percent=0)

        with pytest.raises(ValidationError, match="cpu_target_percent"):
            AutoScalingMixin().configure_cpu_autoscaling(service, settings)
        service.auto_scale_task_count.assert_not_called()


class TestIAMPolicyMixin:
    """Test task role statements."""

    def test_statement_added_to_task_role(self):
        task_definition = Mock()

        statement = IAMPolicyMixin().add_subnet_discovery_permissions(task_definition)

        task_definition.add_to_task_role_policy.assert_called_once_with(statement)

    @pytest.mark.parametrize("actions,resources", [
        ([], ["*"]),
        (["ec2:DescribeSubnets"], []),
    ])
    def test_empty_statement_rejected(self, actions, resources):
        task_definition = Mock()

        with pytest.raises(ValueError):
            IAMPolicyMixin().add_task_role_statement(task_definition, actions, resources)
        task_definition.add_to_task_role_policy.assert_not_called()


class TestSecurityGroupMixin:
    """Test rules towards the shared security group."""

    def test_invalid_port_rejected(self):
        service = Mock()

        with pytest.raises(ValidationError):
            SecurityGroupMixin().allow_service_to_security_group(
                service, Mock(), port=0, rule_name="frontendtobackend"
            )
        service.connections.allow_to.assert_not_called()
