"""
Инфраструктурный слой контекста бронирования.

Содержит реализации портов в памяти и консольные адаптеры
для логирования и уведомлений.
"""
import json
import sys
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set
from uuid import uuid4

from shared_kernel import (
    BookingNotFoundException,
    BookingUnavailableException,
    NotificationFailedException,
    PaymentDeclinedException,
    generate_id,
)

from . import interfaces as ports
from .domain import BookingRequest, Room

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO"):
        level = level.upper()
        if level not in _LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {level}")
        self._threshold = _LEVELS[level]

    def _write(self, level: str, message: str, context: Dict[str, Any]) -> None:
        if _LEVELS[level] < self._threshold:
            return
        stream = sys.stdout if _LEVELS[level] < _LEVELS["WARNING"] else sys.stderr
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._write("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, kwargs)


class InMemoryRoomInventory(ports.IRoomInventory):
    """
    Склад номеров в памяти.

    Номер считается свободным, пока его не заняли через book_room.
    """

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: Dict[str, Room] = {}
        self._booked: Set[str] = set()
        for room in rooms or []:
            self.add_room(room)

    def add_room(self, room: Room) -> None:
        if room.id in self._rooms:
            raise ValueError(f"Room with id {room.id} already exists")
        self._rooms[room.id] = room

    def get_available_rooms(self) -> List[Room]:
        return [
            room for room_id, room in self._rooms.items()
            if room_id not in self._booked
        ]

    def get_room_count(self) -> int:
        return len(self._rooms)

    def find_available_room_id(self, request: BookingRequest) -> str:
        for room in self.get_available_rooms():
            if room.capacity >= request.guest_count:
                return room.id
        raise BookingUnavailableException(
            f"Нет свободного номера на {request.guest_count} гостей"
        )

    def book_room(self, room_id: str) -> None:
        self._ensure_exists(room_id)
        if room_id in self._booked:
            raise BookingUnavailableException(f"Номер {room_id} уже занят")
        self._booked.add(room_id)

    def release_room(self, room_id: str) -> None:
        self._ensure_exists(room_id)
        self._booked.discard(room_id)

    def _ensure_exists(self, room_id: str) -> None:
        if room_id not in self._rooms:
            raise BookingUnavailableException(f"Номер {room_id} не найден")


class InMemoryBookingStore(ports.IBookingStore):
    """Реализация хранилища бронирований в памяти."""

    def __init__(self):
        self._bookings: Dict[str, BookingRequest] = {}

    def save(self, request: BookingRequest) -> str:
        booking_id = generate_id()
        # Храним копию, чтобы последующие изменения запроса не влияли на запись
        self._bookings[booking_id] = request.model_copy(deep=True)
        return booking_id

    def get(self, booking_id: str) -> BookingRequest:
        if booking_id not in self._bookings:
            raise BookingNotFoundException(booking_id)
        return self._bookings[booking_id]

    def delete(self, booking_id: str) -> None:
        if booking_id not in self._bookings:
            raise BookingNotFoundException(booking_id)
        del self._bookings[booking_id]

    def __len__(self) -> int:
        return len(self._bookings)


class DummyPaymentGateway(ports.IPaymentGateway):
    """Заглушка платежного шлюза для тестирования."""

    def __init__(self, limit: Optional[float] = None):
        """
        Args:
            limit: Максимальная сумма списания; платежи выше отклоняются
        """
        self.limit = limit
        self.processed_payments: Dict[str, Dict[str, Any]] = {}

    def pay(self, request: BookingRequest, amount: float) -> str:
        """Списывает сумму за проживание."""
        if self.limit is not None and amount > self.limit:
            raise PaymentDeclinedException(
                f"Сумма {amount} превышает лимит {self.limit}"
            )
        return self._record("TXN", "payment", request, amount)

    def refund(self, request: BookingRequest, amount: float) -> str:
        """Возвращает сумму за проживание."""
        return self._record("RFND", "refund", request, amount)

    def _record(
        self, prefix: str, kind: str, request: BookingRequest, amount: float
    ) -> str:
        transaction_id = f"{prefix}-{uuid4().hex[:8].upper()}"
        self.processed_payments[transaction_id] = {
            "transaction_id": transaction_id,
            "kind": kind,
            "status": "completed",
            "amount": amount,
            "room_id": request.room_id,
            "processed_at": datetime.utcnow().isoformat(),
        }
        return transaction_id


class ConsoleNotificationService(ports.INotificationService):
    """Сервис уведомлений, который выводит подтверждения в консоль."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[BookingRequest] = []

    def send_booking_confirmation(self, request: BookingRequest) -> None:
        """Отправляет подтверждение бронирования."""
        if self.fail:
            raise NotificationFailedException(
                "Не удалось доставить подтверждение бронирования"
            )
        print("\n--- [Notification Service] ---")
        print(f"Subject: Подтверждение бронирования номера {request.room_id}")
        print("Body:")
        print("  Уважаемый гость,")
        print(
            f"  Ваше бронирование с {request.check_in} по {request.check_out} "
            f"на {request.guest_count} гостей подтверждено."
        )
        if request.prepaid:
            print("  Проживание оплачено заранее.")
        print("--- [End of Notification] ---\n")
        self.sent.append(request)
