"""
Конфигурация пакетной обработки.

Настройки берутся из YAML-файла, затем переопределяются
переменными окружения и аргументами командной строки.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .shared_kernel import ConfigurationError

CONFIG_PATH_ENV = "GYM_MEMBERSHIP_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"

# Переменная окружения -> поле настроек
ENV_OVERRIDES = {
    "GYM_MEMBERSHIP_INPUT": "input_file",
    "GYM_MEMBERSHIP_OUTPUT": "output_file",
    "GYM_MEMBERSHIP_LOG_LEVEL": "log_level",
}

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Настройки запуска."""

    input_file: str = "input.txt"
    output_file: str = "output.txt"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level


class SettingsLoader:
    """Загружает Settings из файла, окружения и явных значений."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Settings:
        data = self._load_file(config_path)

        for env_var, field_name in ENV_OVERRIDES.items():
            value = self._environ.get(env_var)
            if value:
                data[field_name] = value

        data.update({k: v for k, v in (overrides or {}).items() if v is not None})

        try:
            return Settings(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Некорректная конфигурация: {e}") from e

    def _load_file(self, config_path: Optional[str]) -> Dict[str, Any]:
        explicit = config_path or self._environ.get(CONFIG_PATH_ENV)
        if explicit:
            path = Path(explicit)
            if not path.exists():
                raise ConfigurationError(f"Файл конфигурации не найден: {path}")
        else:
            path = Path(DEFAULT_CONFIG_PATH)
            if not path.exists():
                return {}

        logger.info("Загрузка конфигурации из %s", path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Не удалось прочитать {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: ожидается словарь настроек")
        return data
