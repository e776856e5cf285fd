#!/usr/bin/env python3
"""Tests for display string lookup."""
from models import MessageKey, Status, interval_label, status_label, translate
from models.messages import is_rtl, normalize_language


class TestTranslate:
    """Tests for translate."""

    def test_english(self):
        assert translate("header.title") == "Equipment Maintenance System"

    def test_arabic(self):
        assert translate("equipment.overdue", "ar") == "متأخر"

    def test_accepts_message_key(self):
        assert translate(MessageKey.TOAST_FILL_REQUIRED) == "Please fill in all required fields"

    def test_arabic_spare_parts_strings(self):
        assert translate(MessageKey.SPARE_PARTS_TITLE, "ar") == "طلبات قطع الغيار"
        assert translate(MessageKey.TOAST_NOT_FOUND, "ar", id="9") == "المعدة '9' غير موجودة"

    def test_every_key_in_both_tables(self):
        """No key needs another language's table to display."""
        for language in ("en", "ar"):
            for key in MessageKey:
                assert translate(key, language) != key.value

    def test_missing_key_does_not_borrow_english(self, monkeypatch):
        from models import messages
        monkeypatch.delitem(messages.TRANSLATIONS["ar"], "spareParts.title")
        assert translate(MessageKey.SPARE_PARTS_TITLE, "ar") == "spareParts.title"

    def test_unknown_key_returns_key(self):
        assert translate("no.such.key") == "no.such.key"
        assert translate("no.such.key", "ar") == "no.such.key"

    def test_params_replaced(self):
        assert translate("equipment.inDays", days=3) == "In 3 days"
        assert translate("toast.maintenanceScheduledDesc", name="HVAC") == "Maintenance for HVAC has been scheduled."

    def test_plural_by_count(self):
        assert translate("alert.overdueCount", count=1) == "1 equipment item overdue for maintenance."
        assert translate("alert.overdueCount", count=2) == "2 equipment items overdue for maintenance."

    def test_unknown_language_uses_english(self):
        assert translate("toast.error", "fr") == "Error"


class TestLanguageHelpers:
    """Tests for language helpers."""

    def test_normalize_language(self):
        assert normalize_language("AR") == "ar"
        assert normalize_language("de") == "en"
        assert normalize_language(None) == "en"

    def test_is_rtl(self):
        assert is_rtl("ar")
        assert not is_rtl("en")


class TestLabels:
    """Tests for status and interval labels."""

    def test_status_label(self):
        assert status_label(Status.GOOD) == "Up to Date"
        assert status_label(Status.DUE) == "Due Soon"
        assert status_label(Status.OVERDUE, "ar") == "متأخر"

    def test_interval_label(self):
        assert interval_label("3 months") == "Every 3 Months"
        assert interval_label("1 year", "ar") == "كل سنة"

    def test_unknown_interval_label_passthrough(self):
        assert interval_label("every so often") == "every so often"
