"""
Прикладной слой контекста бронирования.

Содержит оркестратор, который координирует расчет цены, оплату,
сохранение бронирования и отправку подтверждения через порты.
"""

from typing import Optional

from shared_kernel import BookingUnavailableException

from . import interfaces as ports
from .domain import (
    EXCHANGE_RATE,
    BookingAttempt,
    BookingPolicy,
    BookingRequest,
    BookingState,
    FixedRateCurrencyConverter,
    PricingCalculator,
    RoomAvailabilityAggregator,
)
from .infrastructure import ConsoleLogger


class BookingOrchestrator:
    """
    Сервис приложения для создания и отмены бронирований.

    Не хранит состояния между вызовами: каждый вызов - независимая
    последовательность обращений к портам. Ошибки портов пробрасываются
    без изменений, повторов и компенсирующих действий нет.
    """

    def __init__(
        self,
        payment: ports.IPaymentGateway,
        room_inventory: ports.IRoomInventory,
        store: ports.IBookingStore,
        notifications: ports.INotificationService,
        pricing: Optional[PricingCalculator] = None,
        converter: Optional[ports.ICurrencyConverter] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._payment = payment
        self._room_inventory = room_inventory
        self._store = store
        self._notifications = notifications
        self._pricing = pricing or PricingCalculator()
        self._converter = converter or FixedRateCurrencyConverter(EXCHANGE_RATE)
        self._availability = RoomAvailabilityAggregator(room_inventory)
        self._logger = logger or ConsoleLogger()

    def calculate_price(self, request: BookingRequest) -> float:
        """Рассчитывает стоимость проживания в базовой валюте."""
        return self._pricing.calculate(request)

    def calculate_price_euro(
        self,
        request: BookingRequest,
        converter: Optional[ports.ICurrencyConverter] = None,
    ) -> float:
        """
        Рассчитывает стоимость проживания во вторичной валюте.

        Переданный конвертер действует только для этого вызова.
        """
        convert = self._converter if converter is None else converter
        price = self.calculate_price(request)
        converted = convert(price)
        self._logger.debug(
            "Цена переведена во вторичную валюту",
            price=price,
            converted=converted,
            base_currency=getattr(convert, "base_currency", None),
            secondary_currency=getattr(convert, "secondary_currency", None),
        )
        return converted

    def get_available_place_count(self) -> int:
        """Возвращает количество свободных мест во всех номерах."""
        return self._availability.available_place_count()

    def make_booking(self, request: BookingRequest) -> str:
        """Создает бронирование и возвращает его идентификатор."""
        attempt = BookingAttempt()
        try:
            BookingPolicy.validate_request(request)

            # Подбираем номер до расчета цены
            room_id = self._room_inventory.find_available_room_id(request)
            if not room_id:
                raise BookingUnavailableException("Нет свободного номера под запрос")

            attempt.price = self._pricing.calculate(request)
            self._advance(attempt, BookingState.PRICED)

            if request.prepaid:
                token = self._payment.pay(request, attempt.price)
                request.paid_amount = attempt.price
                request.payment_token = token
                self._advance(attempt, BookingState.PAID)

            # Занимаем номер до сохранения: отказ склада не оставляет записи
            self._room_inventory.book_room(room_id)

            request.room_id = room_id
            attempt.booking_id = self._store.save(request)
            self._advance(attempt, BookingState.PERSISTED)

            # Бронирование уже сохранено: ошибка отправки не откатывает его
            self._notifications.send_booking_confirmation(request)
            self._advance(attempt, BookingState.CONFIRMED)

        except Exception as e:
            attempt.fail(str(e))
            self._logger.error(
                "Не удалось создать бронирование",
                error=str(e),
                error_type=type(e).__name__,
                states=[state.value for state in attempt.history],
                booking_id=attempt.booking_id,
            )
            raise

        self._logger.info(
            "Бронирование создано",
            booking_id=attempt.booking_id,
            room_id=room_id,
            price=attempt.price,
            prepaid=request.prepaid,
        )
        return attempt.booking_id

    def cancel_booking(self, booking_id: str) -> None:
        """Отменяет бронирование по идентификатору."""
        try:
            request = self._store.get(booking_id)

            if request.room_id:
                self._room_inventory.release_room(request.room_id)

            # Возвращаем ровно ту сумму, которая была списана
            if request.prepaid and request.paid_amount is not None:
                self._payment.refund(request, request.paid_amount)

            self._store.delete(booking_id)

        except Exception as e:
            self._logger.error(
                "Не удалось отменить бронирование",
                booking_id=booking_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        self._logger.info("Бронирование отменено", booking_id=booking_id)

    def _advance(self, attempt: BookingAttempt, state: BookingState) -> None:
        attempt.advance(state)
        self._logger.debug(f"Попытка бронирования: {state.value}")
