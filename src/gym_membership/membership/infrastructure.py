"""
Инфраструктурный слой контекста членства.

Содержит реестр в памяти и работу с текстовыми файлами
команд и отчетов.
"""
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..shared_kernel import ReportIOError
from . import interfaces as ports
from .domain import Booking, GymClass, Member

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    """Возвращает текущую маску прав процесса, не меняя ее."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


class InMemoryMembershipRegistry(ports.IMembershipRegistry):
    """Реализация реестра в памяти."""

    def __init__(self):
        self._members: List[Member] = []
        self._classes: List[GymClass] = []
        self._bookings: List[Booking] = []

    @property
    def members(self) -> Tuple[Member, ...]:
        return tuple(self._members)

    @property
    def classes(self) -> Tuple[GymClass, ...]:
        return tuple(self._classes)

    @property
    def bookings(self) -> Tuple[Booking, ...]:
        return tuple(self._bookings)

    def register_member(self, name: str, member_id: int) -> Member:
        member = Member(name=name, member_id=member_id)
        self._members.append(member)
        return member

    def schedule_class(
        self,
        class_name: str,
        start_time: datetime,
        end_time: datetime,
        max_capacity: int,
    ) -> GymClass:
        gym_class = GymClass(
            class_name=class_name,
            start_time=start_time,
            end_time=end_time,
            max_capacity=max_capacity,
        )
        self._classes.append(gym_class)
        return gym_class

    def add_booking(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def find_member_by_id(self, member_id: int) -> Optional[Member]:
        # При совпадающих ID выигрывает первый зарегистрированный
        return next((m for m in self._members if m.member_id == member_id), None)

    def find_class_by_name(self, class_name: str) -> Optional[GymClass]:
        return next((c for c in self._classes if c.class_name == class_name), None)


class TextFileReportGateway(ports.IReportGateway):
    """Чтение файла команд и атомарная запись отчета в UTF-8."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def read_lines(self, path: str) -> List[str]:
        """
        Читает файл команд построчно.

        Args:
            path: Путь к входному файлу

        Raises:
            ReportIOError: Если файл не удалось прочитать или декодировать
        """
        try:
            text = Path(path).read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ReportIOError(f"Не удалось прочитать {path}: {e}") from e
        return text.splitlines()

    def write_report(self, path: str, lines: Iterable[str]) -> None:
        """
        Записывает отчет целиком, заменяя существующий файл.

        Сначала пишется временный файл в той же директории,
        затем он переименовывается поверх целевого. Права файла
        определяются umask процесса, как у обычного open().

        Raises:
            ReportIOError: Если отчет не удалось записать
        """
        target = Path(path)
        content = "\n".join(lines)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding=self._encoding, newline="") as f:
                f.write(content)
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise ReportIOError(f"Не удалось записать {path}: {e}") from e
        logger.debug("Отчет записан в %s", target)
