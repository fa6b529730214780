"""
Модуль контекста бронирования (Booking Context).

Отвечает за оркестрацию бронирования номеров, включая:
- Расчет стоимости проживания и перевод во вторичную валюту
- Оплату, сохранение и подтверждение бронирования
- Подсчет свободных мест и отмену бронирований
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
