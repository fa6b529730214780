"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, List, Protocol

from .domain import BookingRequest, Room


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRoomInventory(Protocol):
    """
    Интерфейс склада номеров.

    Порт не гарантирует атомарность: два одновременных запроса могут получить
    один и тот же room_id. Защита от двойного бронирования остается
    на стороне реализации (например, book_room по принципу compare-and-swap).
    """

    def get_available_rooms(self) -> List[Room]: ...
    def get_room_count(self) -> int: ...
    def find_available_room_id(self, request: BookingRequest) -> str: ...
    def book_room(self, room_id: str) -> None: ...
    def release_room(self, room_id: str) -> None: ...


class IPaymentGateway(Protocol):
    """Интерфейс для взаимодействия с платежным шлюзом."""

    def pay(self, request: BookingRequest, amount: float) -> str: ...
    def refund(self, request: BookingRequest, amount: float) -> str: ...


class IBookingStore(Protocol):
    """Интерфейс хранилища бронирований."""

    def save(self, request: BookingRequest) -> str: ...
    def get(self, booking_id: str) -> BookingRequest: ...
    def delete(self, booking_id: str) -> None: ...


class INotificationService(Protocol):
    """Интерфейс для отправки подтверждений бронирования."""

    def send_booking_confirmation(self, request: BookingRequest) -> None: ...


class ICurrencyConverter(Protocol):
    """Перевод суммы из базовой валюты во вторичную."""

    def __call__(self, amount: float) -> float: ...
