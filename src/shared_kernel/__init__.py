"""
Общее ядро (Shared Kernel) для системы бронирования.

Содержит общие исключения и утилиты, используемые контекстом бронирования.
"""

from .domain import (
    BookingErrorCause,
    BookingException,
    BookingNotFoundException,
    BookingUnavailableException,
    BusinessRuleValidationException,
    # Исключения
    DomainException,
    InvalidRequestException,
    NotificationFailedException,
    PaymentDeclinedException,
    # Утилиты
    generate_id,
    now,
)

__all__ = [
    # Перечисления
    "BookingErrorCause",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "BookingException",
    "InvalidRequestException",
    "BookingUnavailableException",
    "PaymentDeclinedException",
    "NotificationFailedException",
    "BookingNotFoundException",
    # Утилиты
    "generate_id",
    "now",
]
