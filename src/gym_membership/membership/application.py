"""
Прикладной слой контекста членства.

Содержит интерпретатор команд и сервис приложения, который
прогоняет файл команд через реестр и формирует отчет.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel

from ..shared_kernel import InvalidFieldError, parse_int, parse_timestamp
from . import interfaces as ports
from .domain import BookingService

REPORT_HEADER = (
    "Output:",
    "------",
    "Format: <Member Name> booked <Class Name> at <Booking Time>",
    "",
)


# DTO для исходящих данных


class BatchReport(BaseModel):
    """Результат обработки одного файла команд."""

    lines: List[str]
    processed: int  # Непустые строки входа
    bookings: int  # Успешные записи за прогон

    def render(self) -> str:
        """Текст отчета в том виде, в каком он пишется в файл."""
        return "\n".join(self.lines)


class CommandInterpreter:
    """
    Интерпретатор построчных команд.

    Каждая непустая строка разбивается по запятым, поля обрезаются
    от пробелов, первое поле выбирает команду. Ошибочная строка
    превращается в строку отчета и не прерывает обработку.
    """

    def __init__(
        self,
        registry: ports.IMembershipRegistry,
        booking_service: Optional[BookingService] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        self._registry = registry
        self._booking_service = booking_service or BookingService(registry)
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: Dict[str, Callable[[List[str], str], Optional[str]]] = {
            "register": self._register,
            "schedule": self._schedule,
            "book": self._book,
        }

    def execute(self, line: str) -> Optional[str]:
        """
        Выполняет одну строку команды.

        Returns:
            Строку для отчета или None, если строка пустая
            либо команда выполнена без вывода
        """
        command_line = line.strip()
        if not command_line:
            return None

        parts = [part.strip() for part in command_line.split(",")]
        handler = self._handlers.get(parts[0])
        if handler is None:
            return self._reject(f"Invalid command: {command_line}")
        return handler(parts, command_line)

    def run(self, lines: Iterable[str]) -> List[str]:
        """Выполняет все строки и возвращает отчет вместе с заголовком."""
        output = list(REPORT_HEADER)
        for line in lines:
            result = self.execute(line)
            if result is not None:
                output.append(result)
        return output

    def _register(self, parts: List[str], command_line: str) -> Optional[str]:
        if len(parts) < 3:
            return self._reject(f"Invalid register command: {command_line}")
        try:
            member_id = parse_int(parts[2])
        except InvalidFieldError:
            return self._reject(f"Invalid member ID: {command_line}")

        self._registry.register_member(name=parts[1], member_id=member_id)
        return None

    def _schedule(self, parts: List[str], command_line: str) -> Optional[str]:
        if len(parts) < 5:
            return self._reject(f"Invalid schedule command: {command_line}")
        # Вместимость проверяется раньше времени
        try:
            max_capacity = parse_int(parts[4])
        except InvalidFieldError:
            return self._reject(f"Invalid max capacity: {command_line}")
        try:
            start_time = parse_timestamp(parts[2])
            end_time = parse_timestamp(parts[3])
        except InvalidFieldError:
            return self._reject(f"Invalid schedule time format: {command_line}")

        self._registry.schedule_class(
            class_name=parts[1],
            start_time=start_time,
            end_time=end_time,
            max_capacity=max_capacity,
        )
        return None

    def _book(self, parts: List[str], command_line: str) -> str:
        if len(parts) < 4:
            return self._reject(f"Invalid book command: {command_line}")
        try:
            member_id = parse_int(parts[1])
        except InvalidFieldError:
            return self._reject(f"Invalid member ID: {command_line}")
        try:
            booking_time = parse_timestamp(parts[3])
        except InvalidFieldError:
            return self._reject(f"Invalid booking time format: {command_line}")

        member = self._registry.find_member_by_id(member_id)
        gym_class = self._registry.find_class_by_name(parts[2])
        if member is None or gym_class is None:
            return self._reject(f"Invalid member ID or class name: {command_line}")

        outcome = self._booking_service.attempt_booking(
            member, gym_class, booking_time
        )
        if not outcome.succeeded:
            self._logger.debug(
                "Запись отклонена (%s): %s", outcome.status.value, command_line
            )
        return outcome.message

    def _reject(self, message: str) -> str:
        self._logger.debug("Строка отклонена: %s", message)
        return message


# Сервисы приложения


class MembershipApplicationService:
    """Сервис приложения для пакетной обработки файла команд."""

    def __init__(
        self,
        registry: ports.IMembershipRegistry,
        gateway: ports.IReportGateway,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._registry = registry
        self._gateway = gateway
        self._logger = logger or logging.getLogger(__name__)
        self._interpreter = CommandInterpreter(
            registry, BookingService(registry), self._logger
        )

    @property
    def registry(self) -> ports.IMembershipRegistry:
        return self._registry

    def process_lines(self, lines: Iterable[str]) -> BatchReport:
        """Обрабатывает строки команд без обращения к файлам."""
        lines = list(lines)
        bookings_before = len(self._registry.bookings)

        report = BatchReport(
            lines=self._interpreter.run(lines),
            processed=sum(1 for line in lines if line.strip()),
            bookings=len(self._registry.bookings) - bookings_before,
        )
        self._logger.info(
            "Обработано строк: %d, членов клуба: %d, занятий: %d, записей: %d",
            report.processed,
            len(self._registry.members),
            len(self._registry.classes),
            report.bookings,
        )
        return report

    def process_file(self, input_path: str, output_path: str) -> BatchReport:
        """
        Читает файл команд, выполняет их и записывает отчет.

        Raises:
            ReportIOError: При ошибке чтения или записи; отчет не создается
        """
        self._logger.info("Обработка %s -> %s", input_path, output_path)
        lines = self._gateway.read_lines(input_path)
        report = self.process_lines(lines)
        self._gateway.write_report(output_path, report.lines)
        return report
