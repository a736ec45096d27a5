"""
Unit tests for the platform reference construct.

The construct only records handles to resources owned by the base
platform stack; it must never declare resources of its own.
"""

import json
import os

import pytest
import aws_cdk as cdk
from aws_cdk.assertions import Template

from stacks.common.exceptions import StackConfigurationError, ValidationError
from stacks.platform.construct import PlatformReference


@pytest.fixture
def host_stack(app, test_env):
    return cdk.Stack(app, "PlatformHost", env=test_env)


class TestPlatformReference:
    """Test resolution of the shared platform."""

    def test_all_handles_resolved(self, host_stack, conf):
        platform = PlatformReference(host_stack, "BasePlatform", config=conf)

        assert platform.vpc is not None
        assert platform.sd_namespace is not None
        assert platform.ecs_cluster is not None
        assert platform.services_sec_grp is not None
        assert platform.environment_name == "ecsworkshop"

    def test_vpc_looked_up_by_environment_name(self, app, host_stack, conf):
        PlatformReference(host_stack, "BasePlatform", config=conf)

        with open(os.path.join(app.synth().directory, "manifest.json"), encoding="utf-8") as f:
            manifest = json.load(f)
        vpc_lookups = [m for m in manifest.get("missing", []) if m["provider"] == "vpc-provider"]

        assert len(vpc_lookups) == 1
        assert vpc_lookups[0]["props"]["filter"] == {"tag:Name": "ecsworkshop-base/BaseVPC"}
        assert vpc_lookups[0]["props"]["account"] == "123456789012"
        assert vpc_lookups[0]["props"]["region"] == "eu-central-1"

    def test_handles_use_imported_values(self, host_stack, conf):
        platform = PlatformReference(host_stack, "BasePlatform", config=conf)

        assert host_stack.resolve(platform.sd_namespace.namespace_name) == {"Fn::ImportValue": "NSNAME"}
        assert host_stack.resolve(platform.sd_namespace.namespace_arn) == {"Fn::ImportValue": "NSARN"}
        assert host_stack.resolve(platform.sd_namespace.namespace_id) == {"Fn::ImportValue": "NSID"}
        assert host_stack.resolve(platform.ecs_cluster.cluster_name) == {"Fn::ImportValue": "ECSClusterName"}
        assert host_stack.resolve(platform.services_sec_grp.security_group_id) == {"Fn::ImportValue": "ServicesSecGrp"}

    def test_cluster_bound_to_platform_network_and_namespace(self, host_stack, conf):
        platform = PlatformReference(host_stack, "BasePlatform", config=conf)

        cluster = platform.ecs_cluster
        assert host_stack.resolve(cluster.vpc.vpc_id) == host_stack.resolve(platform.vpc.vpc_id)
        assert host_stack.resolve(cluster.default_cloud_map_namespace.namespace_id) == {"Fn::ImportValue": "NSID"}

    def test_export_names_from_configuration(self, app, test_env, config_factory):
        conf = config_factory(PlatformExports={"ClusterName": "SharedClusterName"})
        stack = cdk.Stack(app, "CustomExports", env=test_env)

        platform = PlatformReference(stack, "BasePlatform", config=conf)

        assert stack.resolve(platform.ecs_cluster.cluster_name) == {"Fn::ImportValue": "SharedClusterName"}
        assert stack.resolve(platform.sd_namespace.namespace_id) == {"Fn::ImportValue": "NSID"}

    def test_empty_export_name_is_rejected(self, app, test_env, config_factory):
        conf = config_factory(PlatformExports={"NamespaceArn": ""})
        stack = cdk.Stack(app, "EmptyExport", env=test_env)

        with pytest.raises(ValidationError, match="NamespaceArn"):
            PlatformReference(stack, "BasePlatform", config=conf)

    def test_creates_no_resources(self, host_stack, conf):
        PlatformReference(host_stack, "BasePlatform", config=conf)

        resources = Template.from_stack(host_stack).to_json().get("Resources", {})
        declared = [r["Type"] for r in resources.values() if r["Type"] != "AWS::CDK::Metadata"]
        assert declared == []

    def test_requires_concrete_environment(self, app, conf):
        stack = cdk.Stack(app, "Agnostic")

        with pytest.raises(StackConfigurationError):
            PlatformReference(stack, "BasePlatform", config=conf)
