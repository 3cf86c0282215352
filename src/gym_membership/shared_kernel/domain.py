"""
Основные доменные типы и утилиты общего ядра.
"""

import re
from datetime import datetime

# Формат отметок времени во входном файле и в отчете: yyyy-MM-dd'T'HH:mm
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Диапазон 64-битного целого со знаком
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_timestamp(value: str) -> datetime:
    """Разбирает отметку времени в локальном часовом поясе."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise InvalidFieldError(f"Некорректная отметка времени: {value!r}")


def format_timestamp(value: datetime) -> str:
    """Форматирует отметку времени тем же шаблоном, что и при разборе."""
    return value.strftime(TIMESTAMP_FORMAT)


def parse_int(value: str) -> int:
    """
    Разбирает целое число.

    Допускаются только необязательный знак и ASCII-цифры,
    значение должно помещаться в 64-битное целое со знаком.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise InvalidFieldError(f"Некорректное целое число: {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidFieldError(f"Целое число вне диапазона: {value!r}")
    return number


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidFieldError(DomainException):
    """Поле команды не удалось разобрать."""

    pass


class ReportIOError(DomainException):
    """Не удалось прочитать входной файл или записать отчет."""

    pass


class ConfigurationError(DomainException):
    """Ошибка загрузки конфигурации."""

    pass
