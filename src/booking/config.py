"""
Настройки контекста бронирования.

Значения читаются из переменных окружения с префиксом BOOKING_
и из файла .env, если он существует.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain import EXCHANGE_RATE, NIGHTLY_RATE


class BookingSettings(BaseSettings):
    """Настройки расчета цены, оплаты и логирования."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    nightly_rate: float = Field(default=NIGHTLY_RATE, gt=0)
    exchange_rate: float = Field(default=EXCHANGE_RATE, gt=0)
    base_currency: str = Field(default="USD", min_length=3, max_length=3)
    secondary_currency: str = Field(default="EUR", min_length=3, max_length=3)
    # Порог, выше которого тестовый платежный шлюз отклоняет списание
    payment_limit: Optional[float] = Field(default=None, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v

    @field_validator("base_currency", "secondary_currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> BookingSettings:
    """Возвращает кэшированный экземпляр настроек."""
    return BookingSettings()
