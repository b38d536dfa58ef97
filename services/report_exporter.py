"""Report assembly and export.

Builds a human-readable report from a calculation and renders it as JSON,
CSV, XML or plain text for download.
"""

from __future__ import annotations

import json
import time
import uuid
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import pandas as pd

from core.config import EXPORT_FORMATS, REPORT_VERSION
from core.exceptions import UnsupportedExportFormatError
from core.logger import get_logger
from services.body_metrics import bmi_category
from services.display_variants import build_variant
from services.nutrition_calculator import CalculationResults, NutritionPlan, UserMetrics, round_half_up

logger = get_logger("services.report_exporter")

MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
    "xml": "application/xml",
    "txt": "text/plain",
}

ANONYMOUS = "Anonymous"


def new_report_id() -> str:
    """Return a report id of the form ``BR-<epoch ms>-<suffix>``."""
    return f"BR-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


def _plan_strings(plan: NutritionPlan) -> Dict[str, str]:
    return {
        "calories": f"{plan.calories} kcal",
        "protein": f"{plan.protein}g",
        "fat": f"{plan.fat}g",
        "carbs": f"{plan.carbs}g",
        "fiber": f"{plan.fiber}g",
    }


def build_report(
    metrics: UserMetrics,
    results: CalculationResults,
    client_name: Optional[str] = None,
    report_id: Optional[str] = None,
    exported_at: Optional[datetime] = None,
) -> dict:
    """Assemble the report payload with formatted values and units.

    Args:
        metrics: Metric input the results were computed from.
        results: Output of `NutritionCalculator.calculate_nutrition`.
        client_name: Name printed on the report; defaults to "Anonymous".
        report_id: Existing report id; a new one is generated when omitted.
        exported_at: Timestamp for the report; defaults to now (UTC).

    Returns:
        Nested dict with client, inputs, results, nutrition, hydration and
        heartRate sections.
    """
    bc = results.body_composition
    exported_at = exported_at or datetime.now(timezone.utc)
    nutrition = {goal: _plan_strings(plan) for goal, plan in results.nutrition.items()}
    nutrition["recomp"] = _plan_strings(build_variant("recomp", results, metrics))
    return {
        "client": {
            "name": client_name or ANONYMOUS,
            "exportDate": exported_at.isoformat(),
            "reportId": report_id or new_report_id(),
            "version": REPORT_VERSION,
        },
        "inputs": {
            "gender": metrics.gender,
            "weight": f"{metrics.weight:g} kg",
            "height": f"{metrics.height:g} cm",
            "age": f"{metrics.age} years",
            "bodyFatPercentage": f"{metrics.body_fat_percentage:g}%",
            "activityLevel": metrics.activity_level,
        },
        "results": {
            "bmr": f"{round_half_up(bc.bmr)} kcal/day",
            "tdee": f"{round_half_up(bc.tdee)} kcal/day",
            "bmi": f"{bc.bmi:.1f} ({bmi_category(bc.bmi)})",
            "leanBodyMass": f"{bc.lean_body_mass:.1f} kg",
            "fatMass": f"{metrics.weight - bc.lean_body_mass:.1f} kg",
        },
        "nutrition": nutrition,
        "hydration": {
            "maintenance": f"{results.regular_hydration.total:.2f}L",
            "training": f"{results.training_hydration.total:.2f}L",
        },
        "heartRate": {
            "maximum": f"{results.heart_rate.maximum} bpm",
            "liss": f"{round_half_up(results.heart_rate.liss_zone)} bpm",
        },
    }


def to_json(report: dict) -> str:
    return json.dumps(report, indent=2)


def to_csv(report: dict) -> str:
    """Flatten the report into a two-column Field/Value table."""
    client = report["client"]
    rows = [
        ("Client Name", client["name"]),
        ("Export Date", client["exportDate"]),
        ("Report ID", client["reportId"]),
        ("", ""),
        ("INPUTS", ""),
        *report["inputs"].items(),
        ("", ""),
        ("RESULTS", ""),
        *report["results"].items(),
        ("", ""),
        ("NUTRITION", ""),
    ]
    for goal, plan in report["nutrition"].items():
        for key, value in plan.items():
            rows.append((f"{goal.capitalize()} {key.capitalize()}", value))
    rows.append(("", ""))
    rows.append(("HYDRATION", ""))
    rows.extend(report["hydration"].items())
    rows.append(("", ""))
    rows.append(("HEART RATE", ""))
    rows.extend(report["heartRate"].items())
    frame = pd.DataFrame(rows, columns=["Field", "Value"])
    return frame.to_csv(index=False, lineterminator="\n")


def _append_section(parent: ET.Element, tag: str, values: dict) -> None:
    section = ET.SubElement(parent, tag)
    for key, value in values.items():
        if isinstance(value, dict):
            _append_section(section, key, value)
        else:
            ET.SubElement(section, key).text = str(value)


def to_xml(report: dict) -> str:
    root = ET.Element("body-recomposition-report")
    for tag in ("client", "inputs", "results", "nutrition", "hydration", "heartRate"):
        _append_section(root, tag, report[tag])
    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="unicode", xml_declaration=True)


def to_txt(report: dict) -> str:
    rule = "=" * 60
    sub = "-" * 40
    client = report["client"]
    lines = [
        "BODY RECOMPOSITION CALCULATOR - NUTRITION REPORT",
        rule,
        "",
        f"Client: {client['name']}",
        f"Report ID: {client['reportId']}",
        f"Exported: {client['exportDate']}",
        "",
        "INPUTS:",
        sub,
    ]
    lines += [f"{key}: {value}" for key, value in report["inputs"].items()]
    lines += ["", "BODY COMPOSITION:", sub]
    lines += [f"{key}: {value}" for key, value in report["results"].items()]
    lines += ["", "NUTRITION:", sub]
    for goal, plan in report["nutrition"].items():
        lines.append(f"{goal.upper()}:")
        lines += [f"  {key}: {value}" for key, value in plan.items()]
        lines.append("")
    lines += ["HYDRATION:", sub]
    lines += [f"{key}: {value}" for key, value in report["hydration"].items()]
    lines += ["", "HEART RATE:", sub]
    lines += [f"{key}: {value}" for key, value in report["heartRate"].items()]
    lines += ["", rule]
    return "\n".join(lines) + "\n"


_RENDERERS = {
    "json": to_json,
    "csv": to_csv,
    "xml": to_xml,
    "txt": to_txt,
}


def export_report(report: dict, fmt: str) -> Tuple[str, str]:
    """Render a report in the requested format.

    Returns:
        Tuple of (content, media type).

    Raises:
        UnsupportedExportFormatError: If `fmt` is not one of EXPORT_FORMATS.
    """
    key = (fmt or "").lower()
    if key not in EXPORT_FORMATS:
        raise UnsupportedExportFormatError(fmt, list(EXPORT_FORMATS))
    content = _RENDERERS[key](report)
    logger.info("Report %s exported as %s (%s chars)", report["client"]["reportId"], key, len(content))
    return content, MEDIA_TYPES[key]
