"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и объявляет общие фикстуры.
"""
import sys
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Добавляем каталог с исходным кодом в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from booking.application import BookingOrchestrator  # noqa: E402
from booking.domain import BookingRequest  # noqa: E402
from booking.interfaces import (  # noqa: E402
    IBookingStore,
    ILogger,
    INotificationService,
    IPaymentGateway,
    IRoomInventory,
)


@pytest.fixture
def make_request():
    """Фабрика запросов: по умолчанию 5 ночей (21.04.2023 - 26.04.2023), 2 гостя."""

    def _make(
        check_out: date = date(2023, 4, 26),
        guest_count: int = 2,
        prepaid: bool = False,
        check_in: date = date(2023, 4, 21),
        room_id=None,
    ) -> BookingRequest:
        return BookingRequest(
            room_id=room_id,
            check_in=check_in,
            check_out=check_out,
            guest_count=guest_count,
            prepaid=prepaid,
        )

    return _make


@pytest.fixture
def payment_mock() -> MagicMock:
    """Фикстура для мокированного платежного шлюза."""
    payment = MagicMock(spec=IPaymentGateway)
    payment.pay.return_value = "TXN-1"
    return payment


@pytest.fixture
def room_inventory_mock() -> MagicMock:
    """Фикстура для мокированного склада номеров."""
    inventory = MagicMock(spec=IRoomInventory)
    inventory.get_available_rooms.return_value = []
    inventory.find_available_room_id.return_value = "1.3"
    return inventory


@pytest.fixture
def store_mock() -> MagicMock:
    """Фикстура для мокированного хранилища бронирований."""
    store = MagicMock(spec=IBookingStore)
    store.save.return_value = "booking-1"
    return store


@pytest.fixture
def notifications_mock() -> MagicMock:
    """Фикстура для мокированного сервиса уведомлений."""
    return MagicMock(spec=INotificationService)


@pytest.fixture
def logger_mock() -> MagicMock:
    """Фикстура для мокированного логгера."""
    return MagicMock(spec=ILogger)


@pytest.fixture
def orchestrator(
    payment_mock: MagicMock,
    room_inventory_mock: MagicMock,
    store_mock: MagicMock,
    notifications_mock: MagicMock,
    logger_mock: MagicMock,
) -> BookingOrchestrator:
    """Фикстура для оркестратора с мокированными портами."""
    return BookingOrchestrator(
        payment=payment_mock,
        room_inventory=room_inventory_mock,
        store=store_mock,
        notifications=notifications_mock,
        logger=logger_mock,
    )
