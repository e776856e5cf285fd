"""Flask web application for facility equipment maintenance tracking."""

import logging
import os
from datetime import date
from pathlib import Path
from typing import Optional

from flask import (
    Flask,
    abort,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.errors import EquipmentNotFound, ValidationError
from models.interval import INTERVAL_LABELS, is_known_interval
from models.loader import equipment_to_dict, load_registry, parse_date
from models.messages import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    MessageKey,
    interval_label,
    is_rtl,
    normalize_language,
    status_label,
    translate,
)
from models.registry import EquipmentRegistry
from models.spare_parts import URGENCY_LEVELS, SparePartRequestList
from models.status import Status

logger = logging.getLogger(__name__)

# Default seed file (relative to project root)
DEFAULT_SEED_FILE = Path(__file__).parent.parent / "equipment" / "university.yaml"

STATUS_FILTERS = ("all", "good", "due", "overdue")


def status_color(status: Status) -> str:
    """Get Tailwind color classes for status."""
    colors = {
        Status.OVERDUE: "bg-red-100 text-red-800 border-red-200",
        Status.DUE: "bg-yellow-100 text-yellow-800 border-yellow-200",
        Status.GOOD: "bg-green-100 text-green-800 border-green-200",
    }
    return colors.get(status, "bg-gray-100 text-gray-800")


def status_badge_color(status: Status) -> str:
    """Get Tailwind color classes for status badge."""
    colors = {
        Status.OVERDUE: "bg-red-500 text-white",
        Status.DUE: "bg-yellow-500 text-white",
        Status.GOOD: "bg-green-500 text-white",
    }
    return colors.get(status, "bg-gray-500 text-white")


def format_money(value) -> str:
    """Format a price with two decimals."""
    if value is None:
        return "—"
    return f"${value:,.2f}"


def get_registry() -> EquipmentRegistry:
    return current_app.extensions["equipment_registry"]


def get_language() -> str:
    return normalize_language(session.get("language") or current_app.config["DEFAULT_LANGUAGE"])


def get_request_list(equipment_id: str) -> SparePartRequestList:
    """Draft spare-part request list for an equipment record, created on demand."""
    item = get_registry().get(equipment_id)
    drafts = current_app.extensions["spare_part_requests"]
    if equipment_id not in drafts:
        drafts[equipment_id] = SparePartRequestList(item.id, item.machine_name)
    return drafts[equipment_id]


def load_seed_registry(seed_file: Optional[str]) -> EquipmentRegistry:
    """Registry from the seed file, or an empty one when there is none."""
    path = Path(seed_file) if seed_file else DEFAULT_SEED_FILE
    if not path.exists():
        if seed_file:
            logger.warning("Seed file not found: %s", path)
        return EquipmentRegistry()
    logger.info("Loading equipment from %s", path)
    return load_registry(path)


def create_app(registry: Optional[EquipmentRegistry] = None, language: Optional[str] = None) -> Flask:
    """
    Build the web app around one equipment registry.

    Configuration comes from the environment: SECRET_KEY,
    FACILITY_SEED_FILE (seed YAML) and FACILITY_LANGUAGE (en or ar).
    """
    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")
    app.config["DEFAULT_LANGUAGE"] = normalize_language(
        language or os.environ.get("FACILITY_LANGUAGE", DEFAULT_LANGUAGE)
    )

    if registry is None:
        registry = load_seed_registry(os.environ.get("FACILITY_SEED_FILE"))
    app.extensions["equipment_registry"] = registry
    app.extensions["spare_part_requests"] = {}

    # Register template filters
    app.jinja_env.filters["status_color"] = status_color
    app.jinja_env.filters["status_badge_color"] = status_badge_color
    app.jinja_env.filters["format_money"] = format_money

    @app.context_processor
    def inject_language():
        language = get_language()
        return {
            "language": language,
            "languages": LANGUAGES,
            "rtl": is_rtl(language),
            "t": lambda key, **params: translate(key, language, **params),
            "status_label": lambda status: status_label(status, language),
            "interval_label": lambda label: interval_label(label, language),
        }

    register_routes(app)
    return app


def register_routes(app: Flask) -> None:
    @app.route("/")
    def index():
        """Dashboard: alerts sidebar, add form, filtered equipment list."""
        registry = get_registry()
        today = date.today()
        search = request.args.get("q", "").strip()
        status_filter = request.args.get("status", "all").lower()
        if status_filter not in STATUS_FILTERS:
            status_filter = "all"

        equipment = registry.search(term=search, status_filter=status_filter, now=today)
        rows = [
            {
                "item": item,
                "status": item.status_at(today),
                "days_until": item.days_until_maintenance(today),
            }
            for item in equipment
        ]

        return render_template(
            "index.html",
            rows=rows,
            alerts=registry.alerts(now=today),
            status_counts=registry.status_counts(now=today),
            search=search,
            status_filter=status_filter,
            status_filters=STATUS_FILTERS,
            intervals=INTERVAL_LABELS,
            today=today,
            Status=Status,
        )

    @app.route("/equipment", methods=["POST"])
    def add_equipment():
        """Handle add equipment form submission."""
        language = get_language()
        try:
            last = parse_date(request.form.get("last_maintenance"))
        except (ValueError, OverflowError):
            flash(translate(MessageKey.TOAST_FILL_REQUIRED, language), "error")
            return redirect(url_for("index"))

        interval = (request.form.get("maintenance_interval") or "").strip()
        if interval and not is_known_interval(interval):
            flash(translate(MessageKey.TOAST_UNKNOWN_INTERVAL, language, interval=interval), "error")
            return redirect(url_for("index"))

        try:
            item = get_registry().add_equipment(
                machine_name=request.form.get("machine_name"),
                part_number=request.form.get("part_number"),
                location=request.form.get("location"),
                maintenance_interval=interval,
                last_maintenance=last,
                spare_parts_needed=request.form.get("spare_parts_needed") in ("on", "true", "1"),
            )
        except ValidationError as e:
            flash(translate(e.message_key, language), "error")
            return redirect(url_for("index"))

        flash(f"{translate(MessageKey.TOAST_EQUIPMENT_ADDED, language)}: {item.machine_name}", "success")
        return redirect(url_for("index"))

    @app.route("/equipment/<equipment_id>/approve", methods=["POST"])
    def approve_spare_parts(equipment_id: str):
        """Approve spare parts for an equipment record."""
        language = get_language()
        try:
            get_registry().approve_spare_parts(equipment_id)
        except EquipmentNotFound:
            flash(translate(MessageKey.TOAST_NOT_FOUND, language, id=equipment_id), "error")
            return redirect(url_for("index"))

        flash(translate(MessageKey.TOAST_SPARE_PARTS_APPROVED_DESC, language), "success")
        return redirect(url_for("index"))

    @app.route("/equipment/<equipment_id>/schedule", methods=["POST"])
    def schedule_maintenance(equipment_id: str):
        """Schedule maintenance for an equipment record."""
        language = get_language()
        try:
            item = get_registry().schedule_maintenance(equipment_id)
        except EquipmentNotFound:
            flash(translate(MessageKey.TOAST_NOT_FOUND, language, id=equipment_id), "error")
            return redirect(url_for("index"))

        flash(translate(MessageKey.TOAST_MAINTENANCE_SCHEDULED_DESC, language, name=item.machine_name), "success")
        return redirect(url_for("index"))

    @app.route("/equipment/<equipment_id>/spare-parts", methods=["GET"])
    def spare_parts(equipment_id: str):
        """Spare-part request list for an equipment record."""
        try:
            requests_list = get_request_list(equipment_id)
        except EquipmentNotFound:
            flash(translate(MessageKey.TOAST_NOT_FOUND, get_language(), id=equipment_id), "error")
            return redirect(url_for("index"))

        return render_template(
            "spare_parts.html",
            item=get_registry().get(equipment_id),
            requests_list=requests_list,
            urgency_levels=URGENCY_LEVELS,
        )

    @app.route("/equipment/<equipment_id>/spare-parts", methods=["POST"])
    def add_spare_part_request(equipment_id: str):
        """Add a spare-part request to the draft list."""
        language = get_language()
        try:
            requests_list = get_request_list(equipment_id)
        except EquipmentNotFound:
            flash(translate(MessageKey.TOAST_NOT_FOUND, language, id=equipment_id), "error")
            return redirect(url_for("index"))

        quantity = request.form.get("quantity")
        price = request.form.get("estimated_price")
        try:
            quantity_val = int(quantity) if quantity else None
            price_val = float(price) if price else None
            requests_list.add(
                part_name=request.form.get("part_name"),
                quantity=quantity_val,
                part_number=request.form.get("part_number") or None,
                description=request.form.get("description") or None,
                estimated_price=price_val,
                supplier=request.form.get("supplier") or None,
                urgency=request.form.get("urgency") or None,
            )
        except ValidationError as e:
            flash(translate(e.message_key, language), "error")
        except ValueError:
            flash(translate(MessageKey.SPARE_PARTS_FILL_REQUIRED, language), "error")
        else:
            flash(translate(MessageKey.SPARE_PARTS_ADDED, language), "success")

        return redirect(url_for("spare_parts", equipment_id=equipment_id))

    @app.route("/equipment/<equipment_id>/spare-parts/<request_id>/remove", methods=["POST"])
    def remove_spare_part_request(equipment_id: str, request_id: str):
        """Remove a spare-part request from the draft list."""
        try:
            get_request_list(equipment_id).remove(request_id)
        except EquipmentNotFound:
            abort(404)
        return redirect(url_for("spare_parts", equipment_id=equipment_id))

    @app.route("/equipment/<equipment_id>/spare-parts/submit", methods=["POST"])
    def submit_spare_part_requests(equipment_id: str):
        """Submit all drafted spare-part requests for approval."""
        language = get_language()
        try:
            requests_list = get_request_list(equipment_id)
        except EquipmentNotFound:
            flash(translate(MessageKey.TOAST_NOT_FOUND, language, id=equipment_id), "error")
            return redirect(url_for("index"))

        try:
            submitted = requests_list.submit()
        except ValidationError as e:
            flash(translate(e.message_key, language), "error")
            return redirect(url_for("spare_parts", equipment_id=equipment_id))

        flash(
            translate(
                MessageKey.SPARE_PARTS_SUBMITTED, language,
                count=len(submitted), name=requests_list.equipment_name,
            ),
            "success",
        )
        return redirect(url_for("index"))

    @app.route("/lang/<code>")
    def set_language(code: str):
        """Switch display language for this browser session."""
        session["language"] = normalize_language(code)
        return redirect(request.referrer or url_for("index"))

    @app.route("/api/equipment")
    def api_equipment():
        """JSON list of equipment, filtered like the dashboard."""
        search = request.args.get("q", "").strip()
        status_filter = request.args.get("status", "all").lower()
        if status_filter not in STATUS_FILTERS:
            return jsonify({"error": f"Unknown status filter: {status_filter}"}), 400

        today = date.today()
        equipment = get_registry().search(term=search, status_filter=status_filter, now=today)
        return jsonify([equipment_to_dict(item, today) for item in equipment])

    @app.route("/api/equipment/<equipment_id>")
    def api_equipment_detail(equipment_id: str):
        try:
            item = get_registry().get(equipment_id)
        except EquipmentNotFound as e:
            return jsonify({"error": str(e)}), 404
        return jsonify(equipment_to_dict(item))

    @app.route("/api/alerts")
    def api_alerts():
        """JSON alert summary: counts plus overdue-then-due items."""
        today = date.today()
        alerts = get_registry().alerts(now=today)
        return jsonify({
            "overdueCount": alerts.overdue_count,
            "dueSoonCount": alerts.due_soon_count,
            "allCurrent": alerts.all_current,
            "items": [equipment_to_dict(item, today) for item in alerts.items],
        })


app = create_app()


if __name__ == "__main__":
    # Run with debug mode for development
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
