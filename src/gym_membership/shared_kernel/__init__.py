"""
Общее ядро (Shared Kernel) системы учета членства в спортзале.

Содержит общие типы данных и утилиты, используемые контекстом членства,
конфигурацией и точкой входа.
"""

from .domain import (
    # Константы
    TIMESTAMP_FORMAT,
    ConfigurationError,
    # Исключения
    DomainException,
    InvalidFieldError,
    ReportIOError,
    # Утилиты
    format_timestamp,
    parse_int,
    parse_timestamp,
)

__all__ = [
    # Константы
    "TIMESTAMP_FORMAT",
    # Исключения
    "DomainException",
    "InvalidFieldError",
    "ReportIOError",
    "ConfigurationError",
    # Утилиты
    "parse_timestamp",
    "format_timestamp",
    "parse_int",
]
