import logging

from .membership.application import MembershipApplicationService
from .membership.infrastructure import (
    InMemoryMembershipRegistry,
    TextFileReportGateway,
)


def bootstrap_app():
    """Создает и настраивает все компоненты приложения."""
    # 1. Реестр в памяти живет ровно один прогон
    registry = InMemoryMembershipRegistry()

    # 2. Шлюз файлов отчета
    gateway = TextFileReportGateway()

    # 3. Сервис приложения получает зависимости снаружи
    service = MembershipApplicationService(
        registry=registry,
        gateway=gateway,
        logger=logging.getLogger("gym_membership"),
    )

    return {
        "registry": registry,
        "gateway": gateway,
        "membership_service": service,
    }
