"""
Display strings for the CLI and web dashboard.

A flat key -> string table per language. A key missing from the table
displays as the raw key. Strings may hold {param} placeholders, and a
"singular|plural" pair picked by the count parameter.
"""

from enum import Enum
from typing import Any, Union

from .status import Status

DEFAULT_LANGUAGE = "en"
LANGUAGES = ("en", "ar")
RTL_LANGUAGES = ("ar",)


class MessageKey(str, Enum):
    HEADER_TITLE = "header.title"
    HEADER_SUBTITLE = "header.subtitle"
    HEADER_DEPARTMENT = "header.department"
    HEADER_FACILITY = "header.facility"

    EQUIPMENT_UP_TO_DATE = "equipment.upToDate"
    EQUIPMENT_DUE_SOON = "equipment.dueSoon"
    EQUIPMENT_OVERDUE = "equipment.overdue"
    EQUIPMENT_LAST_MAINTENANCE = "equipment.lastMaintenance"
    EQUIPMENT_NEXT_MAINTENANCE = "equipment.nextMaintenance"
    EQUIPMENT_IN_DAYS = "equipment.inDays"
    EQUIPMENT_OVERDUE_BY = "equipment.overdueBy"
    EQUIPMENT_DUE_TODAY = "equipment.dueToday"
    EQUIPMENT_EVERY = "equipment.every"
    EQUIPMENT_SPARE_PARTS_REQUIRED = "equipment.sparePartsRequired"
    EQUIPMENT_APPROVED = "equipment.approved"
    EQUIPMENT_PENDING_APPROVAL = "equipment.pendingApproval"
    EQUIPMENT_REQUEST_APPROVAL = "equipment.requestApproval"
    EQUIPMENT_SCHEDULE_MAINTENANCE = "equipment.scheduleMaintenance"
    EQUIPMENT_PART = "equipment.part"

    FORM_ADD_NEW_EQUIPMENT = "form.addNewEquipment"
    FORM_MACHINE_NAME = "form.machineName"
    FORM_PART_NUMBER = "form.partNumber"
    FORM_LOCATION = "form.location"
    FORM_MAINTENANCE_INTERVAL = "form.maintenanceInterval"
    FORM_LAST_MAINTENANCE_DATE = "form.lastMaintenanceDate"
    FORM_SPARE_PARTS_REQUIRED = "form.sparePartsRequired"
    FORM_SELECT_INTERVAL = "form.selectInterval"
    FORM_EVERY_WEEK = "form.everyWeek"
    FORM_EVERY_2_WEEKS = "form.every2Weeks"
    FORM_EVERY_MONTH = "form.everyMonth"
    FORM_EVERY_3_MONTHS = "form.every3Months"
    FORM_EVERY_6_MONTHS = "form.every6Months"
    FORM_EVERY_YEAR = "form.everyYear"
    FORM_ADD_EQUIPMENT = "form.addEquipment"
    FORM_CANCEL = "form.cancel"

    ALERT_ALL_CURRENT = "alert.allCurrent"
    ALERT_ALL_CURRENT_DESC = "alert.allCurrentDesc"
    ALERT_OVERDUE_MAINTENANCE = "alert.overdueMaintenance"
    ALERT_OVERDUE_COUNT = "alert.overdueCount"
    ALERT_DUE_SOON = "alert.dueSoon"
    ALERT_DUE_SOON_COUNT = "alert.dueSoonCount"
    ALERT_SCHEDULE_OVERVIEW = "alert.scheduleOverview"

    SEARCH_PLACEHOLDER = "search.placeholder"
    SEARCH_NO_RESULTS = "search.noResults"
    FILTER_BY_STATUS = "filter.byStatus"
    FILTER_ALL_EQUIPMENT = "filter.allEquipment"
    FILTER_UP_TO_DATE = "filter.upToDate"
    FILTER_DUE_SOON = "filter.dueSoon"
    FILTER_OVERDUE = "filter.overdue"

    TOAST_ERROR = "toast.error"
    TOAST_FILL_REQUIRED = "toast.fillRequired"
    TOAST_SUCCESS = "toast.success"
    TOAST_EQUIPMENT_ADDED = "toast.equipmentAdded"
    TOAST_MAINTENANCE_SCHEDULED = "toast.maintenanceScheduled"
    TOAST_MAINTENANCE_SCHEDULED_DESC = "toast.maintenanceScheduledDesc"
    TOAST_SPARE_PARTS_APPROVED = "toast.sparePartsApproved"
    TOAST_SPARE_PARTS_APPROVED_DESC = "toast.sparePartsApprovedDesc"
    TOAST_NOT_FOUND = "toast.notFound"
    TOAST_UNKNOWN_INTERVAL = "toast.unknownInterval"

    SPARE_PARTS_TITLE = "spareParts.title"
    SPARE_PARTS_FILL_REQUIRED = "spareParts.fillRequired"
    SPARE_PARTS_ADDED = "spareParts.added"
    SPARE_PARTS_NO_REQUESTS = "spareParts.noRequests"
    SPARE_PARTS_SUBMITTED = "spareParts.submitted"
    SPARE_PARTS_TOTAL = "spareParts.total"
    SPARE_PARTS_UNKNOWN_URGENCY = "spareParts.unknownUrgency"

    LANGUAGE_SWITCH = "language.switch"
    LANGUAGE_CURRENT = "language.current"


TRANSLATIONS = {
    "en": {
        "header.title": "Equipment Maintenance System",
        "header.subtitle": "University of Ha'il",
        "header.department": "Maintenance Department",
        "header.facility": "Facility Management",

        "equipment.upToDate": "Up to Date",
        "equipment.dueSoon": "Due Soon",
        "equipment.overdue": "Overdue",
        "equipment.lastMaintenance": "Last Maintenance",
        "equipment.nextMaintenance": "Next Maintenance",
        "equipment.inDays": "In {days} days",
        "equipment.overdueBy": "Overdue by {days} days",
        "equipment.dueToday": "Due today",
        "equipment.every": "Every",
        "equipment.sparePartsRequired": "Spare Parts Required",
        "equipment.approved": "Approved",
        "equipment.pendingApproval": "Pending Approval",
        "equipment.requestApproval": "Request Approval",
        "equipment.scheduleMaintenance": "Schedule Maintenance",
        "equipment.part": "Part",

        "form.addNewEquipment": "Add New Equipment",
        "form.machineName": "Machine Name",
        "form.partNumber": "Part Number",
        "form.location": "Location",
        "form.maintenanceInterval": "Maintenance Interval",
        "form.lastMaintenanceDate": "Last Maintenance Date",
        "form.sparePartsRequired": "Spare parts required for maintenance",
        "form.selectInterval": "Select interval",
        "form.everyWeek": "Every Week",
        "form.every2Weeks": "Every 2 Weeks",
        "form.everyMonth": "Every Month",
        "form.every3Months": "Every 3 Months",
        "form.every6Months": "Every 6 Months",
        "form.everyYear": "Every Year",
        "form.addEquipment": "Add Equipment",
        "form.cancel": "Cancel",

        "alert.allCurrent": "All Equipment Current",
        "alert.allCurrentDesc": "All equipment maintenance schedules are up to date.",
        "alert.overdueMaintenance": "Overdue Maintenance",
        "alert.overdueCount": (
            "{count} equipment item overdue for maintenance."
            "|{count} equipment items overdue for maintenance."
        ),
        "alert.dueSoon": "Maintenance Due Soon",
        "alert.dueSoonCount": (
            "{count} equipment item due for maintenance within 7 days."
            "|{count} equipment items due for maintenance within 7 days."
        ),
        "alert.scheduleOverview": "Maintenance Schedule Overview",

        "search.placeholder": "Search equipment...",
        "search.noResults": "No equipment found matching your criteria.",
        "filter.byStatus": "Filter by status",
        "filter.allEquipment": "All Equipment",
        "filter.upToDate": "Up to Date",
        "filter.dueSoon": "Due Soon",
        "filter.overdue": "Overdue",

        "toast.error": "Error",
        "toast.fillRequired": "Please fill in all required fields",
        "toast.success": "Success",
        "toast.equipmentAdded": "Equipment added successfully",
        "toast.maintenanceScheduled": "Maintenance Scheduled",
        "toast.maintenanceScheduledDesc": "Maintenance for {name} has been scheduled.",
        "toast.sparePartsApproved": "Spare Parts Approved",
        "toast.sparePartsApprovedDesc": "Spare parts request has been sent for approval.",
        "toast.notFound": "Equipment '{id}' not found",
        "toast.unknownInterval": "Unknown maintenance interval: {interval}",

        "spareParts.title": "Spare Part Requests",
        "spareParts.fillRequired": "Please fill in part name and quantity.",
        "spareParts.added": "Spare part request has been added to the list.",
        "spareParts.noRequests": "Please add at least one spare part request.",
        "spareParts.submitted": (
            "{count} spare part request submitted for approval for {name}."
            "|{count} spare part requests submitted for approval for {name}."
        ),
        "spareParts.total": "Total Estimated Cost",
        "spareParts.unknownUrgency": "Please choose a valid urgency level.",

        "language.switch": "العربية",
        "language.current": "English",
    },
    "ar": {
        "header.title": "نظام صيانة المعدات",
        "header.subtitle": "جامعة حائل",
        "header.department": "قسم الصيانة",
        "header.facility": "إدارة المرافق",

        "equipment.upToDate": "محدث",
        "equipment.dueSoon": "مستحق قريباً",
        "equipment.overdue": "متأخر",
        "equipment.lastMaintenance": "آخر صيانة",
        "equipment.nextMaintenance": "الصيانة القادمة",
        "equipment.inDays": "خلال {days} أيام",
        "equipment.overdueBy": "متأخر بـ {days} أيام",
        "equipment.dueToday": "مستحق اليوم",
        "equipment.every": "كل",
        "equipment.sparePartsRequired": "قطع غيار مطلوبة",
        "equipment.approved": "معتمد",
        "equipment.pendingApproval": "في انتظار الموافقة",
        "equipment.requestApproval": "طلب موافقة",
        "equipment.scheduleMaintenance": "جدولة الصيانة",
        "equipment.part": "الجزء",

        "form.addNewEquipment": "إضافة معدة جديدة",
        "form.machineName": "اسم الماكينة",
        "form.partNumber": "رقم الجزء",
        "form.location": "الموقع",
        "form.maintenanceInterval": "فترة الصيانة",
        "form.lastMaintenanceDate": "تاريخ آخر صيانة",
        "form.sparePartsRequired": "قطع غيار مطلوبة للصيانة",
        "form.selectInterval": "اختر الفترة",
        "form.everyWeek": "كل أسبوع",
        "form.every2Weeks": "كل أسبوعين",
        "form.everyMonth": "كل شهر",
        "form.every3Months": "كل 3 أشهر",
        "form.every6Months": "كل 6 أشهر",
        "form.everyYear": "كل سنة",
        "form.addEquipment": "إضافة معدة",
        "form.cancel": "إلغاء",

        "alert.allCurrent": "جميع المعدات محدثة",
        "alert.allCurrentDesc": "جميع جداول صيانة المعدات محدثة.",
        "alert.overdueMaintenance": "صيانة متأخرة",
        "alert.overdueCount": "{count} معدة متأخرة في الصيانة.|{count} معدات متأخرة في الصيانة.",
        "alert.dueSoon": "صيانة مستحقة قريباً",
        "alert.dueSoonCount": (
            "{count} معدة مستحقة للصيانة خلال 7 أيام."
            "|{count} معدات مستحقة للصيانة خلال 7 أيام."
        ),
        "alert.scheduleOverview": "نظرة عامة على جدول الصيانة",

        "search.placeholder": "البحث في المعدات...",
        "search.noResults": "لم يتم العثور على معدات تطابق معاييرك.",
        "filter.byStatus": "تصفية حسب الحالة",
        "filter.allEquipment": "جميع المعدات",
        "filter.upToDate": "محدث",
        "filter.dueSoon": "مستحق قريباً",
        "filter.overdue": "متأخر",

        "toast.error": "خطأ",
        "toast.fillRequired": "يرجى ملء جميع الحقول المطلوبة",
        "toast.success": "نجح",
        "toast.equipmentAdded": "تم إضافة المعدة بنجاح",
        "toast.maintenanceScheduled": "تم جدولة الصيانة",
        "toast.maintenanceScheduledDesc": "تم جدولة الصيانة لـ {name}.",
        "toast.sparePartsApproved": "تم اعتماد قطع الغيار",
        "toast.sparePartsApprovedDesc": "تم إرسال طلب قطع الغيار للموافقة.",
        "toast.notFound": "المعدة '{id}' غير موجودة",
        "toast.unknownInterval": "فترة صيانة غير معروفة: {interval}",

        "spareParts.title": "طلبات قطع الغيار",
        "spareParts.fillRequired": "يرجى ملء اسم القطعة والكمية.",
        "spareParts.added": "تمت إضافة طلب قطعة الغيار إلى القائمة.",
        "spareParts.noRequests": "يرجى إضافة طلب قطعة غيار واحد على الأقل.",
        "spareParts.submitted": (
            "تم إرسال {count} طلب قطعة غيار للموافقة لـ {name}."
            "|تم إرسال {count} طلبات قطع غيار للموافقة لـ {name}."
        ),
        "spareParts.total": "إجمالي التكلفة التقديرية",
        "spareParts.unknownUrgency": "يرجى اختيار مستوى استعجال صالح.",

        "language.switch": "English",
        "language.current": "العربية",
    },
}

STATUS_KEYS = {
    Status.GOOD: MessageKey.EQUIPMENT_UP_TO_DATE,
    Status.DUE: MessageKey.EQUIPMENT_DUE_SOON,
    Status.OVERDUE: MessageKey.EQUIPMENT_OVERDUE,
}

INTERVAL_KEYS = {
    "1 week": MessageKey.FORM_EVERY_WEEK,
    "2 weeks": MessageKey.FORM_EVERY_2_WEEKS,
    "1 month": MessageKey.FORM_EVERY_MONTH,
    "3 months": MessageKey.FORM_EVERY_3_MONTHS,
    "6 months": MessageKey.FORM_EVERY_6_MONTHS,
    "1 year": MessageKey.FORM_EVERY_YEAR,
}


def normalize_language(language: str) -> str:
    """Known language code, or the default."""
    language = (language or "").lower()
    return language if language in LANGUAGES else DEFAULT_LANGUAGE


def is_rtl(language: str) -> bool:
    return normalize_language(language) in RTL_LANGUAGES


def translate(key: Union[MessageKey, str], language: str = DEFAULT_LANGUAGE, **params: Any) -> str:
    """
    Look up a display string.

    A key missing from the language table comes back unchanged. With a
    count parameter, "singular|plural" strings pick a form.
    """
    key = key.value if isinstance(key, MessageKey) else key
    table = TRANSLATIONS[normalize_language(language)]
    text = table.get(key) or key

    if "count" in params and "|" in text:
        singular, plural = text.split("|", 1)
        text = singular if params["count"] == 1 else plural

    for name, value in params.items():
        text = text.replace(f"{{{name}}}", str(value))
    return text


def status_label(status: Status, language: str = DEFAULT_LANGUAGE) -> str:
    return translate(STATUS_KEYS[status], language)


def interval_label(interval: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Display text for an interval choice ("Every Month"), or the raw label."""
    key = INTERVAL_KEYS.get(interval)
    if key is None:
        return interval
    return translate(key, language)
