#!/usr/bin/env python3

import logging
import os

import aws_cdk as cdk
from cdk_nag import ( AwsSolutionsChecks, NagSuppressions )

from helper import config
from stacks import FrontendServiceStack
from stacks.common.constants import FRONTEND_STACK_SUFFIX

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

app = cdk.App()

conf = config.Config(app.node.try_get_context('environment') or config.DEFAULT_ENVIRONMENT_NAME)

# Read the account/region variables once for every stack of this app
env = conf.deployment_environment()

frontend_stack = FrontendServiceStack(app, conf.stack_name(FRONTEND_STACK_SUFFIX),
                                      config=conf,
                                      env=env
                                      )

# CDK Nag AwsSolutions checks, opt-in with: cdk synth -c enableNag=true
if str(app.node.try_get_context('enableNag')).lower() == 'true':
    cdk.Aspects.of(app).add(AwsSolutionsChecks())

# Frontend stack suppressions
NagSuppressions.add_stack_suppressions(frontend_stack, [
    {"id": "AwsSolutions-IAM5", "reason": "ec2:DescribeSubnets does not support resource-level permissions",
     "appliesTo": ["Resource::*"]},
    {"id": "AwsSolutions-ELB2", "reason": "Workshop load balancer does not keep access logs"},
    {"id": "AwsSolutions-EC23", "reason": "Frontend load balancer is public by design and listens on HTTP"},
    {"id": "AwsSolutions-ECS2", "reason": "Environment variables hold service discovery URLs and the region only"},
    {"id": "CdkNagValidationFailure", "reason": "Security group rules use imported values which cannot be validated at synth time"}
])

app.synth()
