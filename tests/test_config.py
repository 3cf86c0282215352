"""
Тесты для загрузки конфигурации.
"""
import pytest

from gym_membership.config import Settings, SettingsLoader
from gym_membership.shared_kernel import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Каждый тест работает в пустой директории без config.yaml."""
    monkeypatch.chdir(tmp_path)


def test_defaults_without_sources():
    settings = SettingsLoader(environ={}).load()

    assert settings == Settings(
        input_file="input.txt", output_file="output.txt", log_level="INFO"
    )


def test_default_config_file_is_picked_up(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "input_file: commands.txt\nlog_level: debug\n", encoding="utf-8"
    )

    settings = SettingsLoader(environ={}).load()

    assert settings.input_file == "commands.txt"
    assert settings.output_file == "output.txt"
    assert settings.log_level == "DEBUG"


def test_environment_overrides_file(tmp_path):
    config = tmp_path / "custom.yaml"
    config.write_text("output_file: from_file.txt\n", encoding="utf-8")
    environ = {
        "GYM_MEMBERSHIP_CONFIG": str(config),
        "GYM_MEMBERSHIP_OUTPUT": "from_env.txt",
    }

    settings = SettingsLoader(environ=environ).load()

    assert settings.output_file == "from_env.txt"


def test_explicit_overrides_win():
    environ = {"GYM_MEMBERSHIP_INPUT": "env.txt"}

    settings = SettingsLoader(environ=environ).load(
        overrides={"input_file": "cli.txt", "output_file": None}
    )

    assert settings.input_file == "cli.txt"
    assert settings.output_file == "output.txt"


def test_missing_explicit_config_file():
    with pytest.raises(ConfigurationError, match="не найден"):
        SettingsLoader(environ={}).load(config_path="nope.yaml")


def test_config_file_must_be_mapping(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        SettingsLoader(environ={}).load()


def test_empty_config_file_uses_defaults(tmp_path):
    (tmp_path / "config.yaml").write_text("", encoding="utf-8")

    assert SettingsLoader(environ={}).load() == Settings()


def test_unknown_log_level_is_rejected():
    with pytest.raises(ConfigurationError):
        SettingsLoader(environ={"GYM_MEMBERSHIP_LOG_LEVEL": "LOUD"}).load()
