"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4


def generate_id() -> str:
    """Генерирует новый непрозрачный идентификатор."""
    return str(uuid4())


class BookingErrorCause(str, Enum):
    """Причины ошибок процесса бронирования."""

    INVALID_REQUEST = "invalid_request"
    BOOKING_UNAVAILABLE = "booking_unavailable"
    PAYMENT_DECLINED = "payment_declined"
    NOTIFICATION_FAILED = "notification_failed"
    NOT_FOUND = "not_found"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class BookingException(DomainException):
    """
    Ошибка процесса бронирования.

    Единый вид ошибки, различаемый по причине (cause).
    Абстрактный: создаются только подклассы с заданной причиной.
    """

    cause: BookingErrorCause

    def __init__(self, message: Optional[str] = None):
        if not hasattr(type(self), "cause"):
            raise TypeError(
                f"{type(self).__name__} не задает причину; используйте подкласс"
            )
        super().__init__(message or self.cause.value)
        self.message = message or self.cause.value


class InvalidRequestException(BookingException):
    """Некорректные даты проживания или количество гостей."""

    cause = BookingErrorCause.INVALID_REQUEST


class BookingUnavailableException(BookingException):
    """Нет номера, подходящего под запрос."""

    cause = BookingErrorCause.BOOKING_UNAVAILABLE


class PaymentDeclinedException(BookingException):
    """Платежный шлюз отклонил списание."""

    cause = BookingErrorCause.PAYMENT_DECLINED


class NotificationFailedException(BookingException):
    """Не удалось отправить подтверждение бронирования."""

    cause = BookingErrorCause.NOTIFICATION_FAILED


class BookingNotFoundException(BookingException):
    """Бронирование с указанным идентификатором не найдено."""

    cause = BookingErrorCause.NOT_FOUND

    def __init__(self, booking_id: str):
        super().__init__(f"Бронирование с id {booking_id} не найдено")
        self.booking_id = booking_id


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.utcnow()
