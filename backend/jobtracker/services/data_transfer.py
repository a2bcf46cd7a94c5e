"""JSON backup export/import and CSV export of the tracker's data."""

import csv
import enum
import io
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import TypeAdapter, ValidationError
from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models import (
    Application,
    Company,
    Contact,
    EmailTemplate,
    Event,
    Interview,
    Reminder,
)
from jobtracker.models.enums import (
    ApplicationStatus,
    ContactStatus,
    EmailTemplateCategory,
    EventStatus,
    EventType,
    InterviewStatus,
    ReminderType,
)
from jobtracker.schemas.analytics import ExportBundle, ExportData, ImportCounts
from jobtracker.schemas.common import assume_utc

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0.0"

# Parents before children so foreign keys resolve on import
COLLECTIONS: dict[str, type] = {
    "companies": Company,
    "contacts": Contact,
    "applications": Application,
    "interviews": Interview,
    "events": Event,
    "reminders": Reminder,
    "email_templates": EmailTemplate,
}

# String columns whose values must belong to an enum
ENUM_COLUMNS: dict[type, dict[str, type[enum.Enum]]] = {
    Contact: {"status": ContactStatus},
    Application: {"status": ApplicationStatus},
    Interview: {"status": InterviewStatus},
    Event: {"type": EventType, "status": EventStatus},
    Reminder: {"type": ReminderType},
    EmailTemplate: {"category": EmailTemplateCategory},
}

CSV_HEADERS = [
    "Company", "Position", "Status", "Applied Date",
    "Salary Min", "Salary Max", "Currency", "Referred",
]


class InvalidBundle(ValueError):
    """Raised when an import bundle can not be applied."""


def row_to_dict(obj) -> dict[str, Any]:
    """Column values of an ORM row, JSON-safe."""
    return jsonable_encoder({attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs})


@lru_cache
def _adapter(python_type: type) -> TypeAdapter:
    return TypeAdapter(python_type | None)


def coerce_row(model: type, row: dict[str, Any]) -> dict[str, Any]:
    """Convert a JSON row back to column values; unknown keys are dropped."""
    values = {}
    enum_columns = ENUM_COLUMNS.get(model, {})
    for attr in inspect(model).column_attrs:
        if attr.key not in row:
            continue
        python_type = enum_columns.get(attr.key) or attr.columns[0].type.python_type
        try:
            value = _adapter(python_type).validate_python(row[attr.key])
        except ValidationError as e:
            raise InvalidBundle(f"{model.__tablename__}.{attr.key}: invalid value") from e
        if isinstance(value, enum.Enum):
            value = value.value
        elif isinstance(value, datetime):
            value = assume_utc(value)
        values[attr.key] = value
    if values.get("id") is None:
        raise InvalidBundle(f"{model.__tablename__}: every record needs an id")
    return values


async def export_bundle(db: AsyncSession) -> ExportBundle:
    data = {}
    for name, model in COLLECTIONS.items():
        result = await db.execute(select(model).order_by(model.created_at))
        data[name] = [row_to_dict(obj) for obj in result.scalars().all()]
    return ExportBundle(
        version=EXPORT_VERSION,
        export_date=datetime.now(timezone.utc),
        data=ExportData(**data),
    )


async def import_bundle(db: AsyncSession, bundle: ExportBundle) -> dict[str, ImportCounts]:
    """Insert records whose ids are not present yet; existing ids are skipped."""
    prepared = {
        name: [coerce_row(model, row) for row in getattr(bundle.data, name)]
        for name, model in COLLECTIONS.items()
    }
    results: dict[str, ImportCounts] = {}
    for name, model in COLLECTIONS.items():
        rows = prepared[name]
        counts = ImportCounts()
        if rows:
            ids = [row["id"] for row in rows]
            existing_result = await db.execute(select(model.id).where(model.id.in_(ids)))
            existing = set(existing_result.scalars().all())
            for row in rows:
                if row["id"] in existing:
                    counts.skipped += 1
                    continue
                db.add(model(**row))
                existing.add(row["id"])
                counts.created += 1
            await db.flush()
        results[name] = counts
        logger.info("Imported %s: %d created, %d skipped", name, counts.created, counts.skipped)
    return results


def applications_csv(applications) -> str:
    """CSV of applications with their company names; every cell is quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for app in applications:
        writer.writerow([
            app.company.name if app.company else "",
            app.position_title,
            app.status,
            app.applied_date.isoformat() if app.applied_date else "",
            app.salary_min if app.salary_min is not None else "",
            app.salary_max if app.salary_max is not None else "",
            app.salary_currency or "",
            "Yes" if app.is_referred else "No",
        ])
    return buffer.getvalue()
