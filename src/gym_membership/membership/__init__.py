"""
Модуль контекста членства (Membership Context).

Отвечает за учет членов клуба и занятий, включая:
- Регистрацию членов клуба и планирование занятий
- Запись на занятия с проверкой мест и времени
- Обработку файла команд и формирование отчета
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
