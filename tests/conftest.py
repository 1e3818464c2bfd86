"""
Shared test fixtures and configuration for entire test suite.

Provides: ECS client mocks, settings cache reset, environment isolation
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest

from bastion.configs.settings import PortForwardSettings, get_settings

TASK_ARN = "arn:aws:ecs:ap-northeast-1:123456789012:task/bastion-cluster/0123456789abcdef0"
RUNTIME_ID = "0123456789abcdef0-1234567890"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Keep BASTION_ environment variables and .env files out of tests.

    Yields:
        None
    """
    for name in ("REGION", "PROFILE", "AWS_CLI", "DOCUMENT_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"BASTION_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> PortForwardSettings:
    """Provide default helper settings."""
    return PortForwardSettings()


@pytest.fixture
def mock_ecs_client():
    """
    Create mock boto3 ECS client with one running task.

    Returns:
        MagicMock: ECS client whose list/describe calls succeed
    """
    client = MagicMock()
    client.list_tasks.return_value = {"taskArns": [TASK_ARN]}
    client.describe_tasks.return_value = {
        "tasks": [
            {
                "taskArn": TASK_ARN,
                "containers": [
                    {"name": "BastionContainer", "runtimeId": RUNTIME_ID},
                ],
            },
        ],
    }
    return client
