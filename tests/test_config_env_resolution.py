"""Mini-README: Tests that configuration resolves the `.env` path deterministically.

Also checks that the site billing defaults can be overridden from the
environment and are turned into a billing configuration.
"""

from pathlib import Path

from plant_billing.config import ENV_FILE_PATH, PROJECT_ROOT, Settings


def test_env_file_path_is_absolute_and_repo_relative() -> None:
    """Ensure settings look for `.env` in the repository root, not cwd."""
    assert ENV_FILE_PATH.is_absolute()
    assert ENV_FILE_PATH == PROJECT_ROOT / ".env"
    assert Settings.model_config["env_file"] == ENV_FILE_PATH


def test_project_root_matches_package_parent() -> None:
    """Guard rail: keep project root aligned with `plant_billing/` parent folder."""
    assert PROJECT_ROOT == Path(__file__).resolve().parents[1]


def test_billing_defaults_are_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_SATURDAY_MINIMUM_HOURS", "5.5")
    monkeypatch.setenv("DEFAULT_BREAKDOWN_RULE_ENABLED", "false")

    config = Settings(_env_file=None).default_billing_config()

    assert config.saturday_minimum_hours == 5.5
    assert config.breakdown_rule_enabled is False
