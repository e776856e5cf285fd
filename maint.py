#!/usr/bin/env python3
"""
Unified CLI for facility equipment maintenance tracking.

Commands:
  status     - List equipment with next maintenance and status
  alerts     - Show overdue and due-soon equipment
  add        - Validate a new equipment record and show its schedule
  approve    - Approve spare parts for an equipment record
  intervals  - List the maintenance interval choices

The seed file is only read. Changes made by add/approve last for the
current invocation.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from models import (
    INTERVAL_DAYS,
    Equipment,
    EquipmentRegistry,
    MaintenanceAlerts,
    MaintenanceError,
    MessageKey,
    interval_label,
    is_known_interval,
    load_registry,
    parse_date,
    status_label,
    translate,
    ValidationError,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_date(value: Optional[date]) -> str:
    """Format a date for display."""
    return value.isoformat() if value is not None else "-"


def format_days(days: int, language: str = "en") -> str:
    """Format days until maintenance ("In 3 days", "Overdue by 2 days", "Due today")."""
    if days < 0:
        return translate(MessageKey.EQUIPMENT_OVERDUE_BY, language, days=abs(days))
    if days == 0:
        return translate(MessageKey.EQUIPMENT_DUE_TODAY, language)
    return translate(MessageKey.EQUIPMENT_IN_DAYS, language, days=days)


def format_spare_parts(item: Equipment, language: str = "en") -> str:
    """Spare parts column: '-', 'Approved' or 'Pending Approval'."""
    if not item.spare_parts_needed:
        return "-"
    if item.spare_parts_approved:
        return translate(MessageKey.EQUIPMENT_APPROVED, language)
    return translate(MessageKey.EQUIPMENT_PENDING_APPROVAL, language)


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


# =============================================================================
# Status command
# =============================================================================


def make_status_table(equipment: List[Equipment], today: date, language: str = "en") -> List[List[str]]:
    """Convert equipment list to table rows."""
    rows = []
    for item in equipment:
        rows.append(
            [
                item.id,
                item.machine_name,
                item.part_number,
                truncate(item.location),
                interval_label(item.maintenance_interval, language),
                format_date(item.last_maintenance),
                format_date(item.next_maintenance),
                format_days(item.days_until_maintenance(today), language),
                status_label(item.status_at(today), language),
                format_spare_parts(item, language),
            ]
        )
    return rows


STATUS_HEADERS = [
    "ID",
    "Machine",
    "Part",
    "Location",
    "Interval",
    "Last",
    "Next",
    "Remaining",
    "Status",
    "Spare Parts",
]


def cmd_status(args, registry: EquipmentRegistry, today: date) -> int:
    """List equipment with next maintenance and status."""
    language = args.lang
    equipment = registry.search(term=args.search, status_filter=args.status, now=today)

    print(translate(MessageKey.HEADER_TITLE, language))
    print(f"As of: {today.isoformat()}")
    if args.search or args.status != "all":
        print(f"Showing: {len(equipment)} of {len(registry)} (filtered)")
    else:
        print(f"Equipment: {len(registry)}")
    print()

    if not equipment:
        print(translate(MessageKey.SEARCH_NO_RESULTS, language))
        return 0

    print(tabulate(make_status_table(equipment, today, language), headers=STATUS_HEADERS, tablefmt="simple"))
    return 0


# =============================================================================
# Alerts command
# =============================================================================


def format_alerts(alerts: MaintenanceAlerts, language: str = "en") -> List[str]:
    """Alert summary lines, overdue first."""
    if alerts.all_current:
        return [
            translate(MessageKey.ALERT_ALL_CURRENT, language),
            translate(MessageKey.ALERT_ALL_CURRENT_DESC, language),
        ]

    lines = []
    if alerts.overdue:
        lines.append(
            f"{translate(MessageKey.ALERT_OVERDUE_MAINTENANCE, language)}: "
            + translate(MessageKey.ALERT_OVERDUE_COUNT, language, count=alerts.overdue_count)
        )
    if alerts.due_soon:
        lines.append(
            f"{translate(MessageKey.ALERT_DUE_SOON, language)}: "
            + translate(MessageKey.ALERT_DUE_SOON_COUNT, language, count=alerts.due_soon_count)
        )
    return lines


def cmd_alerts(args, registry: EquipmentRegistry, today: date) -> int:
    """Show overdue and due-soon equipment."""
    language = args.lang
    alerts = registry.alerts(now=today)

    for line in format_alerts(alerts, language):
        print(line)
    print()

    if alerts.items:
        print(translate(MessageKey.ALERT_SCHEDULE_OVERVIEW, language) + ":")
        rows = [
            [
                item.machine_name,
                item.location,
                format_date(item.next_maintenance),
                status_label(item.status_at(today), language),
            ]
            for item in alerts.items
        ]
        print(tabulate(rows, headers=["Machine", "Location", "Next", "Status"], tablefmt="simple"))

    return 0


# =============================================================================
# Add command
# =============================================================================


def cmd_add(args, registry: EquipmentRegistry, today: date) -> int:
    """Validate a new equipment record and show its schedule."""
    language = args.lang
    interval = args.interval.strip()
    if interval and not is_known_interval(interval):
        print(f"{translate(MessageKey.TOAST_ERROR, language)}: "
              + translate(MessageKey.TOAST_UNKNOWN_INTERVAL, language, interval=interval))
        print(f"  Choose one of: {', '.join(INTERVAL_DAYS)}")
        return 1

    try:
        last = parse_date(args.last)
        item = registry.add_equipment(
            machine_name=args.name,
            part_number=args.part,
            location=args.location,
            maintenance_interval=interval,
            last_maintenance=last,
            spare_parts_needed=args.spare_parts,
            today=today,
        )
    except ValidationError as e:
        print(f"{translate(MessageKey.TOAST_ERROR, language)}: {translate(e.message_key, language)}")
        print(f"  {e}")
        return 1
    except ValueError as e:
        print(f"{translate(MessageKey.TOAST_ERROR, language)}: {e}")
        return 1

    print(translate(MessageKey.TOAST_EQUIPMENT_ADDED, language))
    print(f"  ID:        {item.id}")
    print(f"  Machine:   {item.machine_name}")
    print(f"  Part:      {item.part_number}")
    print(f"  Location:  {item.location}")
    print(f"  Interval:  {interval_label(item.maintenance_interval, language)}")
    print(f"  Last:      {format_date(item.last_maintenance)}")
    print(f"  Next:      {format_date(item.next_maintenance)}")
    print(f"  Status:    {status_label(item.status_at(today), language)}")
    if item.spare_parts_needed:
        print(f"  Spares:    {format_spare_parts(item, language)}")
    print()
    print("(in-memory only - seed file not modified)")
    return 0


# =============================================================================
# Approve command
# =============================================================================


def cmd_approve(args, registry: EquipmentRegistry, today: date) -> int:
    """Approve spare parts for an equipment record."""
    language = args.lang
    try:
        item = registry.approve_spare_parts(args.equipment_id)
    except MaintenanceError as e:
        print(f"{translate(MessageKey.TOAST_ERROR, language)}: {e}")
        return 1

    print(translate(MessageKey.TOAST_SPARE_PARTS_APPROVED, language))
    print(translate(MessageKey.TOAST_SPARE_PARTS_APPROVED_DESC, language))
    print(f"  {item.machine_name}: {format_spare_parts(item, language)}")
    print()
    print("(in-memory only - seed file not modified)")
    return 0


# =============================================================================
# Intervals command
# =============================================================================


def cmd_intervals(args, registry: EquipmentRegistry, today: date) -> int:
    """List the maintenance interval choices."""
    rows = [
        [label, interval_label(label, args.lang), days]
        for label, days in INTERVAL_DAYS.items()
    ]
    print(tabulate(rows, headers=["Label", "Display", "Days"], tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================

COMMANDS = {
    "status": cmd_status,
    "alerts": cmd_alerts,
    "add": cmd_add,
    "approve": cmd_approve,
    "intervals": cmd_intervals,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Facility equipment maintenance tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s equipment/university.yaml status
  %(prog)s equipment/university.yaml status --status overdue
  %(prog)s equipment/university.yaml status --search hvac
  %(prog)s equipment/university.yaml alerts --lang ar
  %(prog)s equipment/university.yaml add --name "Boiler D4" \\
      --part BLR-2024-004 --location "Library - Basement" --interval "3 months"
  %(prog)s equipment/university.yaml approve 1
  %(prog)s equipment/university.yaml intervals
""",
    )
    parser.add_argument(
        "equipment_file",
        type=Path,
        help="Path to equipment YAML seed file",
    )
    parser.add_argument(
        "--lang",
        choices=["en", "ar"],
        default="en",
        help="Display language (default: en)",
    )
    parser.add_argument(
        "--today",
        type=str,
        help="Evaluate status as of this date (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log actions to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="List equipment with next maintenance and status"
    )
    status_parser.add_argument(
        "--search",
        type=str,
        help="Filter by machine name, part number or location (case-insensitive)",
    )
    status_parser.add_argument(
        "--status",
        choices=["all", "good", "due", "overdue"],
        default="all",
        help="Filter by status (default: all)",
    )

    # Alerts subcommand
    subparsers.add_parser("alerts", help="Show overdue and due-soon equipment")

    # Add subcommand
    add_parser = subparsers.add_parser(
        "add", help="Validate a new equipment record and show its schedule"
    )
    add_parser.add_argument("--name", type=str, default="", help="Machine name")
    add_parser.add_argument("--part", type=str, default="", help="Part number")
    add_parser.add_argument("--location", type=str, default="", help="Location")
    add_parser.add_argument(
        "--interval",
        type=str,
        default="",
        help="Maintenance interval (one of: %s)" % ", ".join(INTERVAL_DAYS),
    )
    add_parser.add_argument(
        "--last",
        type=str,
        help="Last maintenance date (default: today)",
    )
    add_parser.add_argument(
        "--spare-parts",
        action="store_true",
        help="Spare parts required for maintenance",
    )

    # Approve subcommand
    approve_parser = subparsers.add_parser(
        "approve", help="Approve spare parts for an equipment record"
    )
    approve_parser.add_argument("equipment_id", type=str, help="Equipment ID")

    # Intervals subcommand
    subparsers.add_parser("intervals", help="List the maintenance interval choices")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate equipment file exists
    if not args.equipment_file.exists():
        print(f"Error: File not found: {args.equipment_file}")
        return 1

    try:
        today = parse_date(args.today) or date.today()
    except (ValueError, OverflowError):
        print(f"Error: Invalid date: {args.today}")
        return 1

    registry = load_registry(args.equipment_file)
    return COMMANDS[args.command](args, registry, today)


if __name__ == "__main__":
    sys.exit(main() or 0)
