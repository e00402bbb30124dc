"""
Unit tests for display helpers

Author: Customer Connect Team
Date: 2025-11-07
"""
from datetime import date

from app.domain import display


class TestFormatCurrency:

    def test_inr_uses_indian_grouping(self):
        assert display.format_currency(12345678.5, "INR") == "₹1,23,45,678.50"

    def test_inr_small_amount(self):
        assert display.format_currency(999, "INR") == "₹999.00"

    def test_usd_uses_western_grouping(self):
        assert display.format_currency("1234567.891", "USD") == "$1,234,567.89"

    def test_missing_amount_is_zero(self):
        assert display.format_currency(None, "USD") == "$0.00"

    def test_blank_as_dash(self):
        assert display.format_currency(0, "INR", blank_as_dash=True) == "-"
        assert display.format_currency(None, "INR", blank_as_dash=True) == "-"
        assert display.format_currency(1500, "INR", blank_as_dash=True) == "₹1,500"

    def test_blank_as_dash_keeps_significant_decimals(self):
        assert display.format_currency(123456, "INR", blank_as_dash=True) == "₹1,23,456"
        assert display.format_currency("1500.50", "INR", blank_as_dash=True) == "₹1,500.5"
        assert display.format_currency(99.99, "INR", blank_as_dash=True) == "₹99.99"

    def test_negative_amount(self):
        assert display.format_currency(-150000, "INR") == "-₹1,50,000.00"

    def test_non_finite_amounts_are_missing(self):
        assert display.format_currency("NaN", "INR") == "₹0.00"
        assert display.format_currency(float("inf"), "USD") == "$0.00"
        assert display.format_currency(float("nan"), "INR", blank_as_dash=True) == "-"


class TestDates:

    def test_format_date(self):
        assert display.format_date("2025-03-05") == "Mar 5, 2025"
        assert display.format_date(date(2024, 12, 25)) == "Dec 25, 2024"

    def test_missing_date_is_dash(self):
        assert display.format_date(None) == "-"
        assert display.format_date("") == "-"

    def test_unparseable_date_is_shown_as_is(self):
        assert display.format_date("next week") == "next week"

    def test_format_datetime(self):
        assert display.format_datetime("2025-03-05T14:30:00Z") == "Mar 5, 2025, 02:30 PM"


class TestStatusColors:
    """Test the status -> color maps of each screen"""

    def test_invoice_delivery_colors(self):
        assert display.invoice_delivery_status_color("Delivered") == "#28a745"
        assert display.invoice_delivery_status_color("dispatched") == "#17a2b8"
        assert display.invoice_delivery_status_color("lost") == display.DEFAULT_STATUS_COLOR

    def test_order_due_colors_match_exactly_after_trim(self):
        assert display.order_due_status_color(" Over Due ") == "#dc3545"
        assert display.order_due_status_color("No Due") == "#28a745"
        assert display.order_due_status_color("over due") == display.DEFAULT_STATUS_COLOR

    def test_statement_and_payment_colors(self):
        assert display.statement_status_color("OVERDUE") == "#dc3545"
        assert display.payment_status_color("completed") == "#28a745"
        assert display.payment_status_color(None) == display.DEFAULT_STATUS_COLOR


class TestLabelsAndPercentages:

    def test_order_status_label(self):
        assert display.order_status_label("processing") == "PROC"
        assert display.order_status_label("Cancelled") == "CANC"
        assert display.order_status_label("on hold") == "ON H"
        assert display.order_status_label(None) == ""

    def test_growth_percentage(self):
        assert display.growth_percentage(150, 100) == 50
        assert display.growth_percentage(90, 120) == -25
        assert display.growth_percentage(10, 0) == 0
        assert display.growth_percentage(10, None) == 0

    def test_percentage(self):
        assert display.percentage(1, 3) == 33
        assert display.percentage(5, 0) == 0

    def test_format_file_size(self):
        assert display.format_file_size(0) == ""
        assert display.format_file_size(512) == "512 Bytes"
        assert display.format_file_size(1536) == "1.5 KB"
        assert display.format_file_size(5 * 1024 * 1024) == "5 MB"
