#!/usr/bin/env python3
"""Tests for maint CLI formatting, table helpers and commands."""
from datetime import date, timedelta

import pytest

from models import Equipment, build_alerts
from maint import (
    format_alerts,
    format_date,
    format_days,
    format_spare_parts,
    main,
    make_status_table,
    truncate,
)

TODAY = date(2024, 3, 10)

SEED = """
equipment:
  - id: '1'
    machineName: HVAC Unit A1
    partNumber: AC-2024-001
    location: Engineering Building - Floor 2
    maintenanceInterval: 1 month
    lastMaintenance: '2024-02-15'
    nextMaintenance: '2024-03-15'
    sparePartsNeeded: true
    sparePartsApproved: false
  - id: '2'
    machineName: Generator Unit B2
    partNumber: GEN-2024-002
    location: Science Building - Basement
    maintenanceInterval: 1 month
    lastMaintenance: '2024-01-10'
    nextMaintenance: '2024-02-10'
  - id: '3'
    machineName: Chiller System C1
    partNumber: CHILL-2024-003
    location: Administration Building - Roof
    maintenanceInterval: 6 months
    lastMaintenance: '2024-02-01'
    nextMaintenance: '2024-08-01'
    sparePartsNeeded: true
    sparePartsApproved: true
"""


def make_equipment(id, days_from_today, **kwargs):
    next_date = TODAY + timedelta(days=days_from_today)
    return Equipment(
        id=id,
        machine_name=f"Machine {id}",
        part_number=f"P-{id}",
        location="Campus",
        maintenance_interval="3 months",
        last_maintenance=next_date - timedelta(days=90),
        next_maintenance=next_date,
        **kwargs,
    )


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "equipment.yaml"
    path.write_text(SEED)
    return path


def run(seed_file, *args):
    return main([str(seed_file), "--today", TODAY.isoformat(), *args])


class TestFormatDays:
    """Tests for format_days."""

    def test_future(self):
        assert format_days(5) == "In 5 days"

    def test_today(self):
        assert format_days(0) == "Due today"

    def test_overdue(self):
        assert format_days(-3) == "Overdue by 3 days"

    def test_arabic(self):
        assert format_days(5, "ar") == "خلال 5 أيام"


class TestFormatHelpers:
    """Tests for format_date, format_spare_parts and truncate."""

    def test_format_date(self):
        assert format_date(date(2024, 3, 15)) == "2024-03-15"
        assert format_date(None) == "-"

    def test_spare_parts_not_needed(self):
        assert format_spare_parts(make_equipment("1", 5)) == "-"

    def test_spare_parts_pending(self):
        assert format_spare_parts(make_equipment("1", 5, spare_parts_needed=True)) == "Pending Approval"

    def test_spare_parts_approved(self):
        item = make_equipment("1", 5, spare_parts_needed=True, spare_parts_approved=True)
        assert format_spare_parts(item) == "Approved"

    def test_truncate(self):
        assert truncate(None) == "-"
        assert truncate("short") == "short"
        assert truncate("this is a very long note", max_len=15) == "this is a ve..."


class TestMakeStatusTable:
    """Tests for make_status_table."""

    def test_empty_list_returns_empty_rows(self):
        assert make_status_table([], TODAY) == []

    def test_single_row(self):
        rows = make_status_table([make_equipment("7", 3)], TODAY)
        assert rows == [[
            "7",
            "Machine 7",
            "P-7",
            "Campus",
            "Every 3 Months",
            "2023-12-14",
            "2024-03-13",
            "In 3 days",
            "Due Soon",
            "-",
        ]]


class TestFormatAlerts:
    """Tests for format_alerts."""

    def test_all_current(self):
        lines = format_alerts(build_alerts([make_equipment("1", 30)], TODAY))
        assert lines == [
            "All Equipment Current",
            "All equipment maintenance schedules are up to date.",
        ]

    def test_counts_pluralized(self):
        alerts = build_alerts(
            [make_equipment("1", -1), make_equipment("2", -2), make_equipment("3", 1)], TODAY
        )
        lines = format_alerts(alerts)
        assert lines == [
            "Overdue Maintenance: 2 equipment items overdue for maintenance.",
            "Maintenance Due Soon: 1 equipment item due for maintenance within 7 days.",
        ]


class TestCommands:
    """Tests for the CLI commands run through main()."""

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.yaml"), "status"]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_status(self, seed_file, capsys):
        assert run(seed_file, "status") == 0
        out = capsys.readouterr().out
        assert "Equipment: 3" in out
        assert "HVAC Unit A1" in out
        assert "Overdue by 29 days" in out

    def test_status_filtered(self, seed_file, capsys):
        assert run(seed_file, "status", "--status", "overdue") == 0
        out = capsys.readouterr().out
        assert "Showing: 1 of 3 (filtered)" in out
        assert "Generator Unit B2" in out
        assert "HVAC Unit A1" not in out

    def test_status_no_results(self, seed_file, capsys):
        assert run(seed_file, "status", "--search", "boiler") == 0
        assert "No equipment found matching your criteria." in capsys.readouterr().out

    def test_alerts(self, seed_file, capsys):
        assert run(seed_file, "alerts") == 0
        out = capsys.readouterr().out
        assert "1 equipment item overdue for maintenance." in out
        assert "1 equipment item due for maintenance within 7 days." in out
        # Overdue listed before due soon
        assert out.index("Generator Unit B2") < out.index("HVAC Unit A1")

    def test_add(self, seed_file, capsys):
        code = run(
            seed_file, "add",
            "--name", "Boiler D4",
            "--part", "BLR-2024-004",
            "--location", "Library - Basement",
            "--interval", "1 month",
            "--last", "2024-02-15",
        )
        assert code == 0
        out = capsys.readouterr().out
        assert "Equipment added successfully" in out
        assert "2024-03-16" in out
        assert "Due Soon" in out

    def test_add_missing_field(self, seed_file, capsys):
        code = run(seed_file, "add", "--name", "Boiler D4", "--interval", "1 month")
        assert code == 1
        out = capsys.readouterr().out
        assert "Please fill in all required fields" in out
        assert "part_number" in out
        assert "location" in out

    def test_add_unknown_interval(self, seed_file, capsys):
        code = run(
            seed_file, "add", "--name", "A", "--part", "B", "--location", "C",
            "--interval", "fortnightly",
        )
        assert code == 1
        out = capsys.readouterr().out
        assert "Error: Unknown maintenance interval: fortnightly" in out
        assert "2 weeks" in out
        assert "Equipment added successfully" not in out

    def test_add_bad_date(self, seed_file, capsys):
        code = run(
            seed_file, "add", "--name", "B", "--part", "P", "--location", "L",
            "--interval", "1 week", "--last", "not a date",
        )
        assert code == 1
        assert "Error" in capsys.readouterr().out

    def test_approve(self, seed_file, capsys):
        assert run(seed_file, "approve", "1") == 0
        out = capsys.readouterr().out
        assert "Spare Parts Approved" in out
        assert "HVAC Unit A1: Approved" in out

    def test_approve_unknown(self, seed_file, capsys):
        assert run(seed_file, "approve", "999") == 1
        assert "Equipment '999' not found" in capsys.readouterr().out

    def test_intervals(self, seed_file, capsys):
        assert run(seed_file, "intervals") == 0
        out = capsys.readouterr().out
        assert "Every 2 Weeks" in out
        assert "365" in out

    def test_arabic_output(self, seed_file, capsys):
        assert main([str(seed_file), "--lang", "ar", "--today", "2024-03-10", "alerts"]) == 0
        assert "صيانة متأخرة" in capsys.readouterr().out
