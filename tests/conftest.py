"""Test configuration and fixtures."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "GITHUB_TOKEN": "test_github_token_123",
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "GITHUB_WEB_HOST": "github.com",
    "USER_AGENT": "pr-title-labeler-test",
    "APP_NAME": "PR Title Labeler Test",
    "APP_VERSION": "1.0.0-test",
    "DEBUG": "true",
    "HOST": "127.0.0.1",
    "PORT": "8000",
    "LOG_LEVEL": "DEBUG",
}

for key, value in test_env_vars.items():
    os.environ[key] = value


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up test environment variables."""
    yield

    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def mock_settings() -> Generator[object, None, None]:
    """Mock settings for individual tests."""
    from pr_title_labeler.config import Settings

    with (
        patch("pr_title_labeler.config.get_settings") as mock_get_settings,
        patch("pr_title_labeler.github.client.get_settings", new=mock_get_settings),
    ):
        test_token = "test_token"
        mock_settings_instance = Settings(
            github_token=test_token,
            github_api_base_url="https://github.example.com/api/v3",
            github_web_host="github.example.com",
            user_agent="mock-agent",
            app_name="Test App",
            app_version="1.0.0",
            debug=True,
            host="127.0.0.1",
            port=8000,
            log_level="DEBUG",
        )
        mock_get_settings.return_value = mock_settings_instance
        yield mock_settings_instance


@pytest.fixture
def pr_url() -> str:
    """URL of the pull request used across end-to-end tests."""
    return "https://github.com/acme/widgets/pull/42"


@pytest.fixture
def pr_api_url() -> str:
    """API URL of the pull request used across end-to-end tests."""
    return "https://api.github.com/repos/acme/widgets/pulls/42"


@pytest.fixture
def labels_api_url() -> str:
    return "https://api.github.com/repos/acme/widgets/issues/42/labels"


@pytest.fixture
def comments_api_url() -> str:
    return "https://api.github.com/repos/acme/widgets/issues/42/comments"
