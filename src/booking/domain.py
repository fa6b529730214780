"""
Доменная модель контекста бронирования.

Содержит запрос на бронирование, номер, политики проверки запроса
и доменные сервисы расчета цены и подсчета свободных мест.
"""

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field
from shared_kernel import (
    BusinessRuleValidationException,
    InvalidRequestException,
    now,
)

if TYPE_CHECKING:
    from .interfaces import IRoomInventory

# Цена за одного гостя за одну ночь в базовой валюте
NIGHTLY_RATE = 50.0

# Курс перевода базовой валюты во вторичную по умолчанию
EXCHANGE_RATE = 0.8


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(frozen=True)

    id: str
    capacity: int = Field(..., ge=1)


class BookingRequest(BaseModel):
    """
    Запрос на бронирование проживания.

    Номер (room_id) может быть не задан до момента создания бронирования.
    """

    model_config = ConfigDict(validate_assignment=True)

    room_id: Optional[str] = None
    check_in: date
    check_out: date
    guest_count: int
    prepaid: bool = False
    # Заполняются при предоплате, до сохранения
    paid_amount: Optional[float] = None
    payment_token: Optional[str] = None

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days


class BookingPolicy:
    """Политики и бизнес-правила для запросов на бронирование."""

    MIN_GUESTS = 1
    MIN_NIGHTS = 1

    @classmethod
    def validate_request(cls, request: BookingRequest) -> None:
        """Проверяет, что запрос соответствует инвариантам."""
        if request.nights < cls.MIN_NIGHTS:
            raise InvalidRequestException(
                "Дата выезда должна быть позже даты заезда"
            )

        if request.guest_count < cls.MIN_GUESTS:
            raise InvalidRequestException(
                f"Количество гостей должно быть не меньше {cls.MIN_GUESTS}"
            )


class PricingCalculator:
    """Доменный сервис расчета стоимости проживания."""

    def __init__(self, nightly_rate: float = NIGHTLY_RATE):
        if nightly_rate <= 0:
            raise ValueError("Цена за ночь должна быть положительной")
        self.nightly_rate = nightly_rate

    def calculate(self, request: BookingRequest) -> float:
        """Возвращает цену: ночи * гости * цена за ночь."""
        BookingPolicy.validate_request(request)
        return request.nights * request.guest_count * self.nightly_rate


class FixedRateCurrencyConverter:
    """Конвертер из базовой валюты во вторичную по фиксированному курсу."""

    def __init__(
        self,
        rate: float,
        base_currency: str = "USD",
        secondary_currency: str = "EUR",
    ):
        if rate <= 0:
            raise ValueError("Курс обмена должен быть положительным")
        self.rate = rate
        self.base_currency = base_currency
        self.secondary_currency = secondary_currency

    def __call__(self, amount: float) -> float:
        return amount * self.rate

    def to_euro(self, amount: float) -> float:
        """Переводит сумму из базовой валюты в евро."""
        return self(amount)


class RoomAvailabilityAggregator:
    """
    Доменный сервис подсчета свободных мест.

    Каждый вызов заново опрашивает склад номеров, результат не кэшируется.
    """

    def __init__(self, room_inventory: "IRoomInventory"):
        self._room_inventory = room_inventory

    def available_place_count(self) -> int:
        """Возвращает суммарную вместимость свободных номеров."""
        rooms: Optional[List[Room]] = self._room_inventory.get_available_rooms()
        # Склад без данных считается пустым
        if not rooms:
            return 0
        return sum(room.capacity for room in rooms)


class BookingState(str, Enum):
    """Состояния попытки бронирования."""

    REQUESTED = "requested"
    PRICED = "priced"
    PAID = "paid"
    PERSISTED = "persisted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


_TRANSITIONS: Dict[BookingState, Set[BookingState]] = {
    BookingState.REQUESTED: {BookingState.PRICED},
    BookingState.PRICED: {BookingState.PAID, BookingState.PERSISTED},
    BookingState.PAID: {BookingState.PERSISTED},
    BookingState.PERSISTED: {BookingState.CONFIRMED},
    BookingState.CONFIRMED: set(),
    BookingState.FAILED: set(),
}


class BookingAttempt(BaseModel):
    """Одна попытка бронирования и пройденные ею состояния."""

    state: BookingState = BookingState.REQUESTED
    history: List[BookingState] = Field(
        default_factory=lambda: [BookingState.REQUESTED]
    )
    price: Optional[float] = None
    booking_id: Optional[str] = None
    failure_reason: Optional[str] = None
    started_at: datetime = Field(default_factory=now)

    @property
    def is_finished(self) -> bool:
        """Проверяет, достигнуто ли конечное состояние."""
        return not _TRANSITIONS[self.state]

    def advance(self, to: BookingState) -> None:
        """Переводит попытку в следующее состояние."""
        if to == BookingState.FAILED or to not in _TRANSITIONS[self.state]:
            raise BusinessRuleValidationException(
                f"Недопустимый переход {self.state.value} -> {to.value}"
            )
        self.state = to
        self.history.append(to)

    def fail(self, reason: str) -> None:
        """Помечает попытку как неуспешную."""
        if self.is_finished:
            raise BusinessRuleValidationException(
                f"Попытка уже завершена в состоянии {self.state.value}"
            )
        self.state = BookingState.FAILED
        self.history.append(BookingState.FAILED)
        self.failure_reason = reason
