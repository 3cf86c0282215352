"""
Интерфейсы (порты) для контекста членства.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, List, Optional, Protocol, Tuple

from .domain import Booking, GymClass, Member


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...


class IMembershipRegistry(Protocol):
    """Интерфейс реестра членов клуба, занятий и записей."""

    @property
    def members(self) -> Tuple[Member, ...]: ...
    @property
    def classes(self) -> Tuple[GymClass, ...]: ...
    @property
    def bookings(self) -> Tuple[Booking, ...]: ...

    def register_member(self, name: str, member_id: int) -> Member: ...
    def schedule_class(
        self,
        class_name: str,
        start_time: datetime,
        end_time: datetime,
        max_capacity: int,
    ) -> GymClass: ...
    def add_booking(self, booking: Booking) -> None: ...
    def find_member_by_id(self, member_id: int) -> Optional[Member]: ...
    def find_class_by_name(self, class_name: str) -> Optional[GymClass]: ...


class IReportGateway(Protocol):
    """Интерфейс чтения команд и записи отчета."""

    def read_lines(self, path: str) -> List[str]: ...
    def write_report(self, path: str, lines: Iterable[str]) -> None: ...
