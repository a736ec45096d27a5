import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import aws_cdk as cdk
import yaml
from yaml.loader import SafeLoader

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

DEFAULT_ENVIRONMENT_NAME = "ecsworkshop"
DEFAULT_REGION_NAME = "eu-central-1"

# First variable that is set wins
ACCOUNT_ENV_VARS = ("AWS_ACCOUNT_ID", "CDK_DEFAULT_ACCOUNT")
REGION_ENV_VARS = ("AWS_DEFAULT_REGION", "CDK_DEFAULT_REGION")

# The base platform stack names its VPC "<environment>-base/BaseVPC"
VPC_LOOKUP_NAME_TEMPLATE = "{environment}-base/BaseVPC"


class EnvironmentNameValidationError(Exception):
    """Raised when the environment name cannot be used for stack names and lookups."""
    pass


def env_lookup(names: Iterable[str], fallback: Optional[str] = None) -> Optional[str]:
    """
    Return the value of the first environment variable in ``names`` that is set.

    Empty values count as unset.

    Args:
        names: Environment variable names in priority order
        fallback: Value returned when none of the variables is set

    Returns:
        The first non-empty value, or ``fallback``
    """
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return fallback


class Config:

    _environment = DEFAULT_ENVIRONMENT_NAME

    def __init__(self, environment, config_dir=None) -> None:
        self._environment = environment
        self.data = {}
        self._config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        # The name becomes part of the file path, so validate before loading
        self._validate_environment_name()
        self.load()
        self._validate_environment_matches()

    @property
    def environment(self) -> str:
        return self._environment

    def load(self) -> dict:
        path = self._config_dir / f'{self._environment}.yaml'
        with open(path, encoding='utf-8') as f:
            self.data = yaml.load(f, Loader=SafeLoader) or {}
        logger.info("Loaded configuration for environment '%s' from %s", self._environment, path)
        return self.data

    def get(self, key):
        return self.data[key]

    def _validate_environment_name(self) -> None:
        """
        Validate the environment name against stack and lookup naming constraints.

        The environment name prefixes the CloudFormation stack name
        ("<environment>-frontend") and the VPC lookup name
        ("<environment>-base/BaseVPC").

        Raises:
            EnvironmentNameValidationError: If the name doesn't meet requirements
        """
        name = self._environment

        if not name:
            raise EnvironmentNameValidationError("Environment name is required")

        if not isinstance(name, str):
            raise EnvironmentNameValidationError("Environment name must be a string")

        # Keeps "<environment>-base/BaseVPC" and the stack names well inside
        # CloudFormation and tag value limits
        MAX_LENGTH = 64

        if len(name) > MAX_LENGTH:
            raise EnvironmentNameValidationError(
                f"Environment name must be {MAX_LENGTH} characters or less. "
                f"Current length: {len(name)}"
            )

        # Stack names must start with a letter; lowercase keeps the VPC name tag stable
        if not re.match(r'^[a-z]([a-z0-9-]*[a-z0-9])?$', name):
            raise EnvironmentNameValidationError(
                f"Environment name '{name}' contains invalid characters. "
                f"Must use only lowercase letters (a-z), numbers (0-9), and hyphens (-), "
                f"start with a letter and end with a letter or number"
            )

        if '--' in name:
            raise EnvironmentNameValidationError(
                f"Environment name '{name}' contains consecutive hyphens"
            )

    def _validate_environment_matches(self) -> None:
        declared = self.data.get('EnvironmentName')
        if declared is not None and declared != self._environment:
            raise EnvironmentNameValidationError(
                f"Configuration file declares EnvironmentName '{declared}' "
                f"but was loaded for environment '{self._environment}'"
            )

    def vpc_lookup_name(self) -> str:
        """Name tag of the VPC created by the base platform stack."""
        return VPC_LOOKUP_NAME_TEMPLATE.format(environment=self._environment)

    def stack_name(self, suffix: str) -> str:
        return f"{self._environment}-{suffix}"

    def get_region_name(self) -> str:
        return self.data.get('RegionName') or DEFAULT_REGION_NAME

    def deployment_environment(self) -> cdk.Environment:
        """
        Resolve the account and region to deploy into.

        Account comes from AWS_ACCOUNT_ID, then CDK_DEFAULT_ACCOUNT, with no
        fallback. Region comes from AWS_DEFAULT_REGION, then CDK_DEFAULT_REGION,
        then the configured RegionName.

        Returns:
            The CDK environment for the stacks of this app
        """
        account = env_lookup(ACCOUNT_ENV_VARS)
        region = env_lookup(REGION_ENV_VARS)

        if region is None:
            region = self.get_region_name()
            logger.warning(
                "None of %s is set, falling back to region %s",
                ", ".join(REGION_ENV_VARS), region
            )

        if account is None:
            logger.warning(
                "None of %s is set, the VPC lookup needs an explicit account",
                ", ".join(ACCOUNT_ENV_VARS)
            )

        return cdk.Environment(account=account, region=region)

    def get_platform_exports(self) -> Dict[str, str]:
        """Get the export names published by the base platform stack."""
        return self.data.get('PlatformExports') or {}

    def get_frontend_config(self) -> Dict[str, Any]:
        """Get the frontend service configuration section."""
        return self.data.get('Frontend') or {}

    def get_autoscaling_config(self) -> Dict[str, Any]:
        """Get the service autoscaling configuration section."""
        return self.data.get('AutoScaling') or {}

    def get_tags(self) -> Dict[str, str]:
        return self.data.get('Tags') or {}
