#!/usr/bin/env python3
"""Tests for Equipment class."""
from datetime import date, timedelta

import pytest

from models import Equipment, Status


def make_equipment(next_maintenance, **kwargs):
    defaults = dict(
        id="1",
        machine_name="HVAC Unit A1",
        part_number="AC-2024-001",
        location="Engineering Building - Floor 2",
        maintenance_interval="1 month",
        last_maintenance=next_maintenance - timedelta(days=30),
        next_maintenance=next_maintenance,
    )
    defaults.update(kwargs)
    return Equipment(**defaults)


class TestEquipmentStatus:
    """Status is always derived from next_maintenance."""

    def test_status_at(self):
        item = make_equipment(date(2024, 3, 15))
        assert item.status_at(date(2024, 3, 10)) == Status.DUE
        assert item.status_at(date(2024, 3, 1)) == Status.GOOD
        assert item.status_at(date(2024, 3, 16)) == Status.OVERDUE

    def test_status_follows_date_changes(self):
        """Changing the date changes the status; nothing stale is kept."""
        item = make_equipment(date.today() + timedelta(days=30))
        assert item.status == Status.GOOD
        item.next_maintenance = date.today() - timedelta(days=1)
        assert item.status == Status.OVERDUE

    def test_days_until_maintenance(self):
        item = make_equipment(date(2024, 3, 15))
        assert item.days_until_maintenance(date(2024, 3, 10)) == 5
        assert item.days_until_maintenance(date(2024, 3, 20)) == -5


class TestEquipmentSpareParts:
    """Tests for spare parts approval."""

    def test_defaults(self):
        item = make_equipment(date(2024, 3, 15))
        assert item.spare_parts_needed is False
        assert item.spare_parts_approved is False
        assert item.spare_parts_pending is False

    def test_none_flags_become_false(self):
        item = make_equipment(date(2024, 3, 15), spare_parts_needed=None, spare_parts_approved=None)
        assert item.spare_parts_needed is False
        assert item.spare_parts_approved is False

    def test_approve(self):
        item = make_equipment(date(2024, 3, 15), spare_parts_needed=True)
        assert item.spare_parts_pending is True
        item.approve_spare_parts()
        assert item.spare_parts_approved is True
        assert item.spare_parts_pending is False

    def test_approve_is_idempotent(self):
        item = make_equipment(date(2024, 3, 15), spare_parts_needed=True)
        item.approve_spare_parts()
        item.approve_spare_parts()
        assert item.spare_parts_approved is True


class TestEquipmentMatches:
    """Tests for case-insensitive search matching."""

    @pytest.fixture
    def item(self):
        return make_equipment(date(2024, 3, 15))

    def test_matches_name(self, item):
        assert item.matches("hvac")

    def test_matches_part_number(self, item):
        assert item.matches("ac-2024")

    def test_matches_location(self, item):
        assert item.matches("FLOOR 2")

    def test_empty_term_matches(self, item):
        assert item.matches("")
        assert item.matches(None)

    def test_no_match(self, item):
        assert not item.matches("generator")
