"""Reports API router.

Saves calculations as reports, lists and fetches them, and exports a report
as JSON, CSV, XML or plain text. Stored inputs are metric; exports are
recomputed from those inputs so they always agree with the calculator.
"""

import json

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from api.deps import get_calculator, get_db_read, get_db_write, get_validator
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import ReportRepository
from database import models
from schemas import ReportCreateRequest, ReportResponse, ReportSummary, ReportListResponse
from services.nutrition_calculator import NutritionCalculator, UserMetrics
from services.report_exporter import build_report, export_report, new_report_id
from services.validator import MetricsValidator

logger = get_logger("api.reports")
router = APIRouter(prefix="/api/reports", tags=["reports"])


def _inputs(report: models.Report) -> dict:
    return {
        "gender": report.gender,
        "weight": report.weight,
        "height": report.height,
        "age": report.age,
        "body_fat_percentage": report.body_fat_percentage,
        "activity_level": report.activity_level,
    }


def _to_response(report: models.Report, warnings=None) -> ReportResponse:
    return ReportResponse(
        id=report.id,
        report_id=report.report_id,
        client_name=report.client_name,
        inputs=_inputs(report),
        results=json.loads(report.results),
        warnings=warnings or [],
        created_at=report.created_at.isoformat(),
    )


def _get_or_404(repo: ReportRepository, id: int) -> models.Report:
    report = repo.get_by_id(id)
    if report is None:
        raise NotFoundError("Report", id)
    return report


@router.post("", response_model=ReportResponse, status_code=201)
def create_report(
    payload: ReportCreateRequest,
    db: Session = Depends(get_db_write),
    calculator: NutritionCalculator = Depends(get_calculator),
    validator: MetricsValidator = Depends(get_validator),
):
    """Validate, calculate and persist a report.

    Raises:
        MetricsValidationError: If the metrics fail range checks (422).
    """
    metrics, warnings = validator.validate_and_normalize(payload, payload.is_metric)
    results = calculator.calculate_nutrition(metrics)
    report = models.Report(
        report_id=new_report_id(),
        client_name=payload.client_name,
        gender=metrics.gender,
        weight=metrics.weight,
        height=metrics.height,
        age=metrics.age,
        body_fat_percentage=metrics.body_fat_percentage,
        activity_level=metrics.activity_level,
        results=json.dumps(results.to_dict()),
    )
    report = ReportRepository(db).create(report)
    logger.info("Report %s saved (id=%s)", report.report_id, report.id)
    return _to_response(report, warnings)


@router.get("", response_model=ReportListResponse)
def list_reports(
    limit: int = Query(50, ge=1, le=200, description="Page size"),
    skip: int = Query(0, ge=0, description="Number of reports to skip"),
    db: Session = Depends(get_db_read),
):
    """Return a page of reports, newest first, with the total stored count."""
    repo = ReportRepository(db)
    rows = repo.list_recent(skip=skip, limit=limit)
    summaries = []
    for r in rows:
        body = json.loads(r.results)["bodyComposition"]
        summaries.append(ReportSummary(
            id=r.id,
            report_id=r.report_id,
            client_name=r.client_name,
            tdee=round(body["tdee"], 1),
            bmi=round(body["bmi"], 1),
            created_at=r.created_at.isoformat(),
        ))
    return ReportListResponse(total_reports=repo.count(), reports=summaries)


@router.get("/{id}", response_model=ReportResponse)
def get_report(id: int, db: Session = Depends(get_db_read)):
    """Return a single report.

    Raises:
        NotFoundError: If no report has this id.
    """
    return _to_response(_get_or_404(ReportRepository(db), id))


@router.get("/{id}/export")
def export(
    id: int,
    fmt: str = Query("json", alias="format", description="json, csv, xml or txt"),
    db: Session = Depends(get_db_read),
    calculator: NutritionCalculator = Depends(get_calculator),
):
    """Download a report as an attachment.

    Raises:
        NotFoundError: If no report has this id.
        UnsupportedExportFormatError: If the format is not supported.
    """
    row = _get_or_404(ReportRepository(db), id)
    metrics = UserMetrics(**_inputs(row))
    results = calculator.calculate_nutrition(metrics)
    report = build_report(metrics, results, client_name=row.client_name, report_id=row.report_id)
    content, media_type = export_report(report, fmt)
    filename = f"nutrition-{row.report_id}.{fmt.lower()}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/{id}", status_code=204)
def delete_report(id: int, db: Session = Depends(get_db_write)):
    """Delete a report.

    Raises:
        NotFoundError: If no report has this id.
    """
    if not ReportRepository(db).delete_by_id(id):
        raise NotFoundError("Report", id)
    logger.info("Report id=%s deleted", id)
    return Response(status_code=204)
