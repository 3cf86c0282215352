"""
Реестр членства в спортзале.

Регистрирует членов клуба, планирует занятия и записывает
на них по файлу построчных команд, формируя текстовый отчет.
"""

from .bootstrap import bootstrap_app
from .config import Settings, SettingsLoader
from .membership.application import (
    BatchReport,
    CommandInterpreter,
    MembershipApplicationService,
)
from .membership.domain import (
    Booking,
    BookingOutcome,
    BookingService,
    BookingStatus,
    GymClass,
    Member,
)
from .membership.infrastructure import (
    InMemoryMembershipRegistry,
    TextFileReportGateway,
)

__all__ = [
    "bootstrap_app",
    "Settings",
    "SettingsLoader",
    "BatchReport",
    "CommandInterpreter",
    "MembershipApplicationService",
    "Booking",
    "BookingOutcome",
    "BookingService",
    "BookingStatus",
    "GymClass",
    "Member",
    "InMemoryMembershipRegistry",
    "TextFileReportGateway",
]
