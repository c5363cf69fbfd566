"""Unit tests for ClientConfig environment defaults and validation."""
import pytest

from dashx_core.config import DEFAULT_BASE_URI, ClientConfig
from dashx_core.exceptions import DashXConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "DASHX_BASE_URI",
        "DASHX_PUBLIC_KEY",
        "DASHX_PRIVATE_KEY",
        "DASHX_TARGET_ENVIRONMENT",
        "DASHX_TARGET_INSTALLATION",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_reads_variables(clean_env):
    clean_env.setenv("DASHX_PUBLIC_KEY", "pub")
    clean_env.setenv("DASHX_PRIVATE_KEY", "priv")
    clean_env.setenv("DASHX_TARGET_ENVIRONMENT", "staging")
    clean_env.setenv("DASHX_TARGET_INSTALLATION", "inst-1")

    config = ClientConfig.from_env()

    assert config.base_uri == DEFAULT_BASE_URI
    assert config.public_key == "pub"
    assert config.private_key == "priv"
    assert config.target_environment == "staging"
    assert config.target_installation == "inst-1"


def test_explicit_overrides_win(clean_env):
    clean_env.setenv("DASHX_PUBLIC_KEY", "env-pub")
    clean_env.setenv("DASHX_BASE_URI", "https://env.example/graphql")

    config = ClientConfig.from_env(public_key="arg-pub", base_uri=None)

    assert config.public_key == "arg-pub"
    assert config.base_uri == "https://env.example/graphql"


def test_environment_read_once(clean_env):
    clean_env.setenv("DASHX_PUBLIC_KEY", "first")
    config = ClientConfig.from_env()

    clean_env.setenv("DASHX_PUBLIC_KEY", "second")

    assert config.public_key == "first"


def test_require_lists_missing_fields(clean_env):
    config = ClientConfig.from_env(public_key="pub")

    with pytest.raises(DashXConfigurationError) as exc_info:
        config.require()

    assert exc_info.value.missing == ["private_key", "target_environment"]
    assert "private_key" in str(exc_info.value)


def test_require_passes_without_installation(clean_env):
    config = ClientConfig(public_key="p", private_key="k", target_environment="dev")

    assert config.require() is config


def test_unknown_override_rejected(clean_env):
    with pytest.raises(TypeError):
        ClientConfig.from_env(api_key="x")


def test_private_key_hidden_from_repr():
    config = ClientConfig(public_key="p", private_key="s3cret", target_environment="dev")

    assert "s3cret" not in repr(config)


def test_empty_env_values_count_as_unset(clean_env):
    clean_env.setenv("DASHX_BASE_URI", "")
    clean_env.setenv("DASHX_TARGET_INSTALLATION", "")

    config = ClientConfig.from_env(
        public_key="p", private_key="k", target_environment="d"
    )

    assert config.base_uri == DEFAULT_BASE_URI
    assert config.target_installation is None
    assert config.require() is config


def test_empty_override_falls_back_to_env(clean_env):
    clean_env.setenv("DASHX_PUBLIC_KEY", "env-pub")

    config = ClientConfig.from_env(public_key="", base_uri="")

    assert config.public_key == "env-pub"
    assert config.base_uri == DEFAULT_BASE_URI


def test_with_overrides_applies_known_fields():
    config = ClientConfig(public_key="p", private_key="k", target_environment="dev")

    updated = config.with_overrides(target_environment="prod", public_key=None)

    assert updated.target_environment == "prod"
    assert updated.public_key == "p"
    assert config.target_environment == "dev"


def test_with_overrides_rejects_unknown_fields():
    config = ClientConfig(public_key="p", private_key="k", target_environment="dev")

    with pytest.raises(TypeError, match="pubic_key"):
        config.with_overrides(pubic_key="x")
