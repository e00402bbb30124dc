"""
Display helpers

Derived, display-only values for list and detail screens: money, dates,
status colors and labels, percentages and file sizes. Nothing here feeds
back into the backend.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional, Union

DEFAULT_STATUS_COLOR = "#6c757d"

INVOICE_DELIVERY_STATUS_COLORS = {
    "pending": "#ffc107",
    "dispatched": "#17a2b8",
    "delivered": "#28a745",
}

# Order-to-cash due status, matched exactly (after trimming)
ORDER_DUE_STATUS_COLORS = {
    "Over Due": "#dc3545",
    "Due": "#ffc107",
    "No Due": "#28a745",
}

STATEMENT_STATUS_COLORS = {
    "paid": "#28a745",
    "partial": "#ffc107",
    "pending": "#007bff",
    "overdue": "#dc3545",
}

PAYMENT_STATUS_COLORS = {
    "completed": "#28a745",
    "partial": "#ffc107",
    "pending": "#007bff",
    "failed": "#dc3545",
}

ORDER_STATUS_LABELS = {
    "pending": "PEND",
    "processing": "PROC",
    "shipped": "SHIP",
    "delivered": "DELV",
    "completed": "COMP",
    "cancelled": "CANC",
}

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$"}

Number = Union[int, float, Decimal, str, None]


def _to_decimal(amount: Number) -> Optional[Decimal]:
    if amount is None or amount == "":
        return None
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def _group_indian(digits: str) -> str:
    """12345678 -> 1,23,45,678"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def _group_western(digits: str) -> str:
    return f"{int(digits):,}"


def format_currency(amount: Number, currency: str = "INR", blank_as_dash: bool = False) -> str:
    """
    Format money for tables

    INR uses Indian digit grouping (lakh/crore), USD western grouping;
    both show two decimals. Missing amounts show as zero, or as "-" when
    blank_as_dash is set; that variant also drops trailing
    zeros of the fraction (₹1,23,456 and ₹1,500.5).
    """
    value = _to_decimal(amount)
    if value is None or (blank_as_dash and value == 0):
        if blank_as_dash:
            return "-"
        value = Decimal("0")

    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):.2f}".partition(".")

    group = _group_indian if currency == "INR" else _group_western
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    if blank_as_dash:
        fraction = fraction.rstrip("0")
        return f"{sign}{symbol}{group(integer)}" + (f".{fraction}" if fraction else "")
    return f"{sign}{symbol}{group(integer)}.{fraction}"


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        text = value.strip().replace("Z", "+00:00")
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def format_date(value: Any) -> str:
    """'2025-03-05' -> 'Mar 5, 2025'; missing dates show as '-'"""
    if not value:
        return "-"
    parsed = _to_datetime(value)
    if parsed is None:
        return str(value)
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def format_datetime(value: Any) -> str:
    """'2025-03-05T14:30:00' -> 'Mar 5, 2025, 02:30 PM'"""
    if not value:
        return "-"
    parsed = _to_datetime(value)
    if parsed is None:
        return str(value)
    return f"{format_date(parsed)}, {parsed.strftime('%I:%M %p')}"


def _color(mapping: Dict[str, str], status: Optional[str], lower: bool = True) -> str:
    if not status:
        return DEFAULT_STATUS_COLOR
    key = status.strip()
    if lower:
        key = key.lower()
    return mapping.get(key, DEFAULT_STATUS_COLOR)


def invoice_delivery_status_color(status: Optional[str]) -> str:
    return _color(INVOICE_DELIVERY_STATUS_COLORS, status)


def order_due_status_color(status: Optional[str]) -> str:
    return _color(ORDER_DUE_STATUS_COLORS, status, lower=False)


def statement_status_color(status: Optional[str]) -> str:
    return _color(STATEMENT_STATUS_COLORS, status)


def payment_status_color(status: Optional[str]) -> str:
    return _color(PAYMENT_STATUS_COLORS, status)


def order_status_label(status: Optional[str]) -> str:
    """Four-letter badge text: 'processing' -> 'PROC'"""
    if not status:
        return ""
    return ORDER_STATUS_LABELS.get(status.lower(), status.upper()[:4])


def growth_percentage(current: Number, previous: Number) -> int:
    """Rounded period-over-period growth; 0 without a previous value"""
    current_value = _to_decimal(current) or Decimal("0")
    previous_value = _to_decimal(previous)
    if not previous_value:
        return 0
    growth = (current_value - previous_value) / previous_value * 100
    return int(growth.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentage(part: Number, whole: Number) -> int:
    part_value = _to_decimal(part) or Decimal("0")
    whole_value = _to_decimal(whole)
    if not whole_value:
        return 0
    return int((part_value / whole_value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_file_size(size: Optional[int]) -> str:
    """1536 -> '1.5 KB'"""
    if not size:
        return ""
    units = ["Bytes", "KB", "MB", "GB"]
    index = 0
    while size >= 1024 ** (index + 1) and index < len(units) - 1:
        index += 1
    value = round(size / 1024 ** index, 2)
    if value == int(value):
        value = int(value)
    return f"{value} {units[index]}"
