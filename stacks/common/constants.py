"""
Constants used across CDK stacks.

Values here are the defaults; config/<environment>.yaml overrides them.
"""

# Stack naming
FRONTEND_STACK_SUFFIX = "frontend"
PLATFORM_CONSTRUCT_ID = "BasePlatform"

# Cross-stack exports published by the base platform stack
PLATFORM_EXPORT_NAMESPACE_NAME = "NamespaceName"
PLATFORM_EXPORT_NAMESPACE_ARN = "NamespaceArn"
PLATFORM_EXPORT_NAMESPACE_ID = "NamespaceId"
PLATFORM_EXPORT_CLUSTER_NAME = "ClusterName"
PLATFORM_EXPORT_SERVICES_SECURITY_GROUP = "ServicesSecurityGroup"

DEFAULT_PLATFORM_EXPORTS = {
    PLATFORM_EXPORT_NAMESPACE_NAME: "NSNAME",
    PLATFORM_EXPORT_NAMESPACE_ARN: "NSARN",
    PLATFORM_EXPORT_NAMESPACE_ID: "NSID",
    PLATFORM_EXPORT_CLUSTER_NAME: "ECSClusterName",
    PLATFORM_EXPORT_SERVICES_SECURITY_GROUP: "ServicesSecGrp",
}

# Frontend service
FRONTEND_CONSTRUCT_ID = "FrontendFargateLBService"
FRONTEND_SERVICE_NAME = "ecsdemo-frontend"
FRONTEND_IMAGE = "adam9098/ecsdemo-frontend"
FRONTEND_PORT = 3000
FRONTEND_CPU = 256
FRONTEND_MEMORY = 512
FRONTEND_DESIRED_COUNT = 1
FRONTEND_PUBLIC_LOAD_BALANCER = True

# Sibling services, resolved through the service discovery namespace
CRYSTAL_URL = "http://ecsdemo-crystal.service:3000/crystal"
NODEJS_URL = "http://ecsdemo-nodejs.service:3000"

# Services behind the shared security group all listen on this port
SERVICE_MESH_PORT = 3000
SERVICE_MESH_RULE_NAME = "frontendtobackend"

# Task role
SUBNET_DISCOVERY_ACTIONS = ["ec2:DescribeSubnets"]

# Autoscaling (off unless AutoScaling.Enabled is true)
DEFAULT_AUTOSCALING_ENABLED = False
DEFAULT_MIN_CAPACITY = 1
DEFAULT_MAX_CAPACITY = 10
DEFAULT_CPU_TARGET_PERCENT = 50
DEFAULT_SCALE_IN_COOLDOWN = 30   # seconds
DEFAULT_SCALE_OUT_COOLDOWN = 30  # seconds
CPU_SCALING_POLICY_ID = "CPUAutoscaling"
