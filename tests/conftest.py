"""
Конфигурация тестов для pytest.
Добавляет директорию src в PYTHONPATH и общие фикстуры.
"""
import sys
from pathlib import Path

import pytest

# Добавляем директорию src в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from gym_membership.membership.application import CommandInterpreter  # noqa: E402
from gym_membership.membership.domain import BookingService  # noqa: E402
from gym_membership.membership.infrastructure import (  # noqa: E402
    InMemoryMembershipRegistry,
)


@pytest.fixture
def registry() -> InMemoryMembershipRegistry:
    """Фикстура, предоставляющая пустой реестр."""
    return InMemoryMembershipRegistry()


@pytest.fixture
def booking_service(registry: InMemoryMembershipRegistry) -> BookingService:
    return BookingService(registry)


@pytest.fixture
def interpreter(
    registry: InMemoryMembershipRegistry, booking_service: BookingService
) -> CommandInterpreter:
    """Фикстура, предоставляющая интерпретатор над общим реестром."""
    return CommandInterpreter(registry, booking_service)
