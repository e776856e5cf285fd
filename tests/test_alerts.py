#!/usr/bin/env python3
"""Tests for alert aggregation."""
from datetime import date, timedelta

from models import Equipment, build_alerts

TODAY = date(2024, 3, 10)


def make_equipment(id, days_from_today):
    next_date = TODAY + timedelta(days=days_from_today)
    return Equipment(
        id=id,
        machine_name=f"Machine {id}",
        part_number=f"P-{id}",
        location="Campus",
        maintenance_interval="1 month",
        last_maintenance=next_date - timedelta(days=30),
        next_maintenance=next_date,
    )


class TestBuildAlerts:
    """Tests for build_alerts."""

    def test_partitions_by_status(self):
        overdue = make_equipment("0", -3)
        due = make_equipment("1", 2)
        good = make_equipment("2", 30)

        alerts = build_alerts([overdue, due, good], TODAY)

        assert alerts.overdue == [overdue]
        assert alerts.due_soon == [due]
        assert alerts.items == [overdue, due]
        assert alerts.overdue_count == 1
        assert alerts.due_soon_count == 1
        assert alerts.all_current is False

    def test_overdue_first_then_source_order(self):
        """Stable partition: no sorting within each group."""
        due_a = make_equipment("a", 7)
        overdue_b = make_equipment("b", -1)
        due_c = make_equipment("c", 0)
        overdue_d = make_equipment("d", -30)

        alerts = build_alerts([due_a, overdue_b, due_c, overdue_d], TODAY)

        assert [e.id for e in alerts.items] == ["b", "d", "a", "c"]

    def test_all_current(self):
        alerts = build_alerts([make_equipment("0", 8), make_equipment("1", 100)], TODAY)
        assert alerts.all_current is True
        assert alerts.items == []

    def test_empty_input(self):
        alerts = build_alerts([], TODAY)
        assert alerts.all_current is True
