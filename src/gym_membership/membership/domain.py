"""
Доменная модель контекста членства.

Содержит сущности члена клуба, занятия и записи на занятие,
а также доменный сервис, принимающий решение о записи.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

from ..shared_kernel import format_timestamp

if TYPE_CHECKING:
    from .interfaces import IMembershipRegistry


class Member(BaseModel):
    """Член клуба."""

    model_config = ConfigDict(frozen=True)

    name: str
    member_id: int  # Уникальность не проверяется


class GymClass(BaseModel):
    """Занятие в спортзале."""

    class_name: str
    start_time: datetime
    end_time: datetime  # Не входит в интервал записи
    max_capacity: int
    booked_count: int = 0

    def has_capacity(self) -> bool:
        """Проверяет, остались ли свободные места (без учета времени)."""
        return self.booked_count < self.max_capacity

    def is_in_session(self, moment: datetime) -> bool:
        """Проверяет попадание в интервал [start_time, end_time)."""
        return self.start_time <= moment < self.end_time

    def reserve_slot(self) -> bool:
        """Занимает одно место, если оно есть."""
        if not self.has_capacity():
            return False
        self.booked_count += 1
        return True


class Booking(BaseModel):
    """Запись члена клуба на занятие."""

    model_config = ConfigDict(frozen=True)

    member: Member
    gym_class: GymClass
    booking_time: datetime


class BookingStatus(str, Enum):
    """Результаты попытки записи."""

    BOOKED = "booked"  # Запись создана
    ALREADY_FULL = "already_full"  # Мест нет, время внутри интервала
    FULL = "full"  # Мест нет, время вне интервала
    INVALID_TIME = "invalid_time"  # Время вне интервала занятия


class BookingOutcome(BaseModel):
    """Итог попытки записи с сообщением для отчета."""

    model_config = ConfigDict(frozen=True)

    status: BookingStatus
    message: str
    booking: Optional[Booking] = None

    @property
    def succeeded(self) -> bool:
        return self.status is BookingStatus.BOOKED


class BookingService:
    """Доменный сервис для записи на занятия."""

    def __init__(self, registry: "IMembershipRegistry"):
        self.registry = registry

    def attempt_booking(
        self, member: Member, gym_class: GymClass, booking_time: datetime
    ) -> BookingOutcome:
        """
        Пытается записать члена клуба на занятие.

        Порядок проверок определяет текст сообщения:
        1. Время внутри [start_time, end_time): место занимается одной
           операцией reserve_slot; если мест нет, ответ "already full".
           Так заполненное занятие внутри интервала отличается от
           заполненного вне его, хотя оба случая означают отсутствие мест.
        2. Время вне интервала и мест нет: "is full".
        3. Иначе время вне расписания.
        """
        booking_time_text = format_timestamp(booking_time)

        if gym_class.is_in_session(booking_time):
            if not gym_class.reserve_slot():
                return BookingOutcome(
                    status=BookingStatus.ALREADY_FULL,
                    message=f"The class {gym_class.class_name} is already full.",
                )

            booking = Booking(
                member=member, gym_class=gym_class, booking_time=booking_time
            )
            self.registry.add_booking(booking)
            return BookingOutcome(
                status=BookingStatus.BOOKED,
                message=(
                    f"{member.name} booked {gym_class.class_name} "
                    f"at {booking_time_text}"
                ),
                booking=booking,
            )

        if not gym_class.has_capacity():
            return BookingOutcome(
                status=BookingStatus.FULL,
                message=f"The class {gym_class.class_name} is full.",
            )

        return BookingOutcome(
            status=BookingStatus.INVALID_TIME,
            message=(
                f"Invalid booking time: {booking_time_text}. "
                f"The class {gym_class.class_name} is scheduled from "
                f"{format_timestamp(gym_class.start_time)} to "
                f"{format_timestamp(gym_class.end_time)}."
            ),
        )
