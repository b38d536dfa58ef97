"""Tests for saving, listing, exporting and deleting reports."""
import json

import pytest

from api.reports import create_report, delete_report, export, get_report, list_reports
from core.exceptions import MetricsValidationError, NotFoundError, UnsupportedExportFormatError
from database.database import ReadSessionLocal, WriteSessionLocal
from schemas import ReportCreateRequest
from services.nutrition_calculator import nutrition_calculator
from services.validator import metrics_validator


def _create(**overrides):
    values = dict(
        client_name="Jane Doe",
        gender="male",
        weight=80,
        height=180,
        age=30,
        body_fat_percentage=15,
        activity_level="moderatelyActive",
    )
    values.update(overrides)
    db = WriteSessionLocal()
    try:
        return create_report(
            ReportCreateRequest(**values),
            db=db,
            calculator=nutrition_calculator,
            validator=metrics_validator,
        )
    finally:
        db.close()


def test_create_and_get_report():
    created = _create()
    assert created.report_id.startswith("BR-")
    assert created.inputs["weight"] == 80
    assert created.results["bodyComposition"]["tdee"] == pytest.approx(3382)
    assert created.results["nutrition"]["maintain"]["calories"] == 3382

    db = ReadSessionLocal()
    try:
        fetched = get_report(created.id, db=db)
        assert fetched.report_id == created.report_id
        assert fetched.results == created.results
    finally:
        db.close()


def test_imperial_input_is_stored_metric():
    created = _create(weight=176, height=6, is_metric=False)
    assert created.inputs["weight"] == pytest.approx(79.83, abs=0.01)
    assert created.inputs["height"] == pytest.approx(182.88)


def test_invalid_metrics_are_not_saved():
    with pytest.raises(MetricsValidationError):
        _create(age=12)


def test_list_reports_newest_first():
    first = _create(client_name="First")
    second = _create(client_name="Second")
    db = ReadSessionLocal()
    try:
        listing = list_reports(limit=50, skip=0, db=db)
        ids = [r.id for r in listing.reports]
        assert listing.total_reports >= len(listing.reports)
        assert ids.index(second.id) < ids.index(first.id)
        summary = next(r for r in listing.reports if r.id == second.id)
        assert summary.tdee == pytest.approx(3382.0)
        assert summary.bmi == pytest.approx(24.7)
    finally:
        db.close()


def test_total_reports_counts_every_stored_report():
    for name in ("A", "B", "C"):
        _create(client_name=name)
    db = ReadSessionLocal()
    try:
        page = list_reports(limit=1, skip=0, db=db)
        assert len(page.reports) == 1
        assert page.total_reports >= 3
        later = list_reports(limit=1, skip=1, db=db)
        assert later.total_reports == page.total_reports
        assert later.reports[0].id != page.reports[0].id
    finally:
        db.close()


@pytest.mark.parametrize("fmt,media_type", [
    ("json", "application/json"),
    ("csv", "text/csv"),
    ("xml", "application/xml"),
    ("txt", "text/plain"),
])
def test_export_formats(fmt, media_type):
    created = _create()
    db = ReadSessionLocal()
    try:
        response = export(created.id, fmt=fmt, db=db, calculator=nutrition_calculator)
        assert response.media_type == media_type
        assert f"nutrition-{created.report_id}.{fmt}" in response.headers["content-disposition"]
        assert created.report_id in response.body.decode()
    finally:
        db.close()


def test_export_json_matches_stored_report():
    created = _create()
    db = ReadSessionLocal()
    try:
        response = export(created.id, fmt="json", db=db, calculator=nutrition_calculator)
        report = json.loads(response.body)
        assert report["client"]["name"] == "Jane Doe"
        assert report["nutrition"]["bulk"]["calories"] == "3720 kcal"
    finally:
        db.close()


def test_export_unsupported_format():
    created = _create()
    db = ReadSessionLocal()
    try:
        with pytest.raises(UnsupportedExportFormatError):
            export(created.id, fmt="pdf", db=db, calculator=nutrition_calculator)
    finally:
        db.close()


def test_delete_report():
    created = _create()
    db = WriteSessionLocal()
    try:
        response = delete_report(created.id, db=db)
        assert response.status_code == 204
        with pytest.raises(NotFoundError) as exc_info:
            delete_report(created.id, db=db)
        assert exc_info.value.status_code == 404
    finally:
        db.close()


def test_missing_report_raises_404():
    db = ReadSessionLocal()
    try:
        with pytest.raises(NotFoundError) as exc_info:
            get_report(999999, db=db)
        assert "Report" in exc_info.value.message
        with pytest.raises(NotFoundError):
            export(999999, fmt="json", db=db, calculator=nutrition_calculator)
    finally:
        db.close()
