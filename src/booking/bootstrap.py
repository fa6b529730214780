from typing import Any, Dict, Iterable, Optional

from .application import BookingOrchestrator
from .config import BookingSettings, get_settings
from .domain import FixedRateCurrencyConverter, PricingCalculator, Room
from .infrastructure import (
    ConsoleLogger,
    ConsoleNotificationService,
    DummyPaymentGateway,
    InMemoryBookingStore,
    InMemoryRoomInventory,
)

SAMPLE_ROOMS = [
    Room(id="101", capacity=2),
    Room(id="201", capacity=2),
    Room(id="301", capacity=4),
    Room(id="401", capacity=6),
]


def bootstrap_app(
    settings: Optional[BookingSettings] = None,
    rooms: Optional[Iterable[Room]] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()

    # 1. Адаптеры портов
    logger = ConsoleLogger(level=settings.log_level)
    room_inventory = InMemoryRoomInventory(SAMPLE_ROOMS if rooms is None else rooms)
    store = InMemoryBookingStore()
    payment = DummyPaymentGateway(limit=settings.payment_limit)
    notifications = ConsoleNotificationService()
    converter = FixedRateCurrencyConverter(
        settings.exchange_rate,
        base_currency=settings.base_currency,
        secondary_currency=settings.secondary_currency,
    )

    # 2. Оркестратор получает зависимости через конструктор
    orchestrator = BookingOrchestrator(
        payment=payment,
        room_inventory=room_inventory,
        store=store,
        notifications=notifications,
        pricing=PricingCalculator(nightly_rate=settings.nightly_rate),
        converter=converter,
        logger=logger,
    )

    return {
        "settings": settings,
        "logger": logger,
        "room_inventory": room_inventory,
        "store": store,
        "payment": payment,
        "notifications": notifications,
        "converter": converter,
        "orchestrator": orchestrator,
    }
