"""Column types shared by domain entities

Amounts keep an exact Decimal round trip on every backend: PostgreSQL uses
NUMERIC(18, 6) and SQLite, which has no decimal storage, keeps the text form.
Timestamps always come back timezone-aware in UTC.
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.types import TypeDecorator

AMOUNT_PRECISION = 18
AMOUNT_SCALE = 6
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)


def quantize_amount(value: Decimal) -> Decimal:
    """Round an amount to the stored scale (half away from zero, like NUMERIC)"""
    return Decimal(value).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


class DecimalText(TypeDecorator):
    """Decimal stored as its text representation, at the amount scale"""

    impl = String(AMOUNT_PRECISION + 2)
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:
        if value is None:
            return None
        return str(quantize_amount(value))

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


def amount_type():
    return Numeric(AMOUNT_PRECISION, AMOUNT_SCALE).with_variant(DecimalText(), "sqlite")


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime normalised to UTC on the way in and out"""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        # SQLite drops the offset; stored values are always UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
