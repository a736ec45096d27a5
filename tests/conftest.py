"""
Shared fixtures for the stack tests.
"""

import pytest
import yaml
import aws_cdk as cdk

from helper.config import Config, CONFIG_DIR, ACCOUNT_ENV_VARS, REGION_ENV_VARS

TEST_ENVIRONMENT = "ecsworkshop"
TEST_ACCOUNT = "123456789012"
TEST_REGION = "eu-central-1"


@pytest.fixture
def conf():
    """Load the checked-in workshop configuration."""
    return Config(TEST_ENVIRONMENT)


@pytest.fixture
def test_env():
    """A concrete deployment environment, required by the VPC lookup."""
    return cdk.Environment(account=TEST_ACCOUNT, region=TEST_REGION)


@pytest.fixture
def app():
    return cdk.App()


@pytest.fixture
def clean_environ(monkeypatch):
    """Remove every account/region variable the app reads."""
    for name in ACCOUNT_ENV_VARS + REGION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def config_factory(tmp_path):
    """
    Build a Config from the workshop configuration with overrides.

    Each override is a top-level section merged into the checked-in data.
    """
    with open(CONFIG_DIR / f"{TEST_ENVIRONMENT}.yaml", encoding="utf-8") as f:
        base = yaml.safe_load(f)

    def _factory(**sections):
        data = dict(base)
        for key, value in sections.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        with open(tmp_path / f"{TEST_ENVIRONMENT}.yaml", "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return Config(TEST_ENVIRONMENT, config_dir=tmp_path)

    return _factory
