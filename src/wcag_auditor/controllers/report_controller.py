# src/wcag_auditor/controllers/report_controller.py
import csv
import json
import logging
from datetime import datetime, timezone
from html import escape
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd
from tqdm.auto import tqdm

from ..model import ValidationResult
from .validation_controller import OptionsInput, ValidationController

logger = logging.getLogger(__name__)

WCAG_VERSION = "2.1"
CONFORMANCE_LEVEL = "AA"
REPORT_FORMATS = ("json", "html", "csv")

CSV_COLUMNS = ["Criterion", "Severity", "Description", "Suggestion"]


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class ReportController:
    """
    Serializes validation results to JSON, HTML or CSV, for a single
    document or a batch of titled documents. Pure formatting: all decisions
    come from the ValidationResult.
    """

    def __init__(self, validator: Optional[ValidationController] = None):
        self.validator = validator or ValidationController()

    # --- ENTRY POINTS ---

    def generate_report(
            self,
            html: str,
            fmt: str = "json",
            title: str = "",
            options: OptionsInput = None
    ) -> str:
        """Validates `html` and renders the report in the requested format."""
        result = self.validator.validate(html, options)
        return self.render(result, fmt, title)

    def render(self, result: ValidationResult, fmt: str = "json", title: str = "") -> str:
        """Renders an existing ValidationResult."""
        data = self.build_report_data(result, title)
        fmt = self._normalize_format(fmt)
        if fmt == "html":
            return self.format_html(data)
        if fmt == "csv":
            return self.format_csv(data)
        return self.format_json(data)

    def generate_batch_report(
            self,
            items: Iterable[Mapping[str, Any]],
            fmt: str = "json",
            options: OptionsInput = None,
            progress: bool = False
    ) -> str:
        """
        Validates a batch of {title, html} items and renders one combined report.
        `progress` shows a tqdm bar while validating.
        """
        items = list(items)
        reports = []
        total_score = 0
        total_errors = 0
        total_warnings = 0

        for item in tqdm(items, desc="Validating", unit="doc", disable=not progress):
            result = self.validator.validate(item.get("html", ""), options)
            report = self.build_report_data(result, item.get("title", "") or "")
            reports.append(report)
            total_score += report["score"]
            total_errors += len(report["errors"])
            total_warnings += len(report["warnings"])

        batch_data = {
            "generated_at": _timestamp(),
            "wcag_version": WCAG_VERSION,
            "conformance_level": CONFORMANCE_LEVEL,
            "total_items": len(items),
            "average_score": int(total_score / len(items) + 0.5) if items else 0,
            "total_errors": total_errors,
            "total_warnings": total_warnings,
            "items": reports,
        }
        logger.debug("Batch report: %d items, %d errors", len(items), total_errors)

        fmt = self._normalize_format(fmt)
        if fmt == "html":
            return self.format_batch_html(batch_data)
        if fmt == "csv":
            return self.format_batch_csv(batch_data)
        return self.format_json(batch_data)

    # --- HELPERS ---

    @staticmethod
    def _normalize_format(fmt: Optional[str]) -> str:
        fmt = (fmt or "json").lower()
        if fmt not in REPORT_FORMATS:
            logger.warning("Unknown report format '%s', falling back to json", fmt)
            return "json"
        return fmt

    @staticmethod
    def build_report_data(result: ValidationResult, title: str = "") -> Dict[str, Any]:
        payload = result.model_dump()
        return {
            "title": title,
            "generated_at": _timestamp(),
            "wcag_version": WCAG_VERSION,
            "conformance_level": CONFORMANCE_LEVEL,
            "score": result.score,
            "compliance_status": "compliant" if result.valid else "non-compliant",
            "errors": payload["errors"],
            "warnings": payload["warnings"],
            "summary": payload["summary"],
            "remediation_actions": payload["remediation_actions"],
        }

    @staticmethod
    def _issue_rows(data: Dict[str, Any]) -> List[Dict[str, str]]:
        return [
            {
                "Criterion": issue.get("criterion", ""),
                "Severity": issue.get("severity", ""),
                "Description": issue.get("description", ""),
                "Suggestion": issue.get("suggestion", ""),
            }
            for issue in data["errors"] + data["warnings"]
        ]

    @staticmethod
    def _to_csv(rows: List[Dict[str, str]], columns: List[str]) -> str:
        # Header stays unquoted; every data field is quoted with "" escaping
        header = ",".join(columns) + "\n"
        if not rows:
            return header
        df = pd.DataFrame(rows, columns=columns)
        return header + df.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")

    # --- FORMATTERS ---

    @staticmethod
    def format_json(data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False)

    def format_csv(self, data: Dict[str, Any]) -> str:
        return self._to_csv(self._issue_rows(data), CSV_COLUMNS)

    def format_batch_csv(self, data: Dict[str, Any]) -> str:
        rows = []
        for item in data["items"]:
            for row in self._issue_rows(item):
                rows.append({"Title": item.get("title", ""), **row})
        return self._to_csv(rows, ["Title"] + CSV_COLUMNS)

    @staticmethod
    def format_html(data: Dict[str, Any]) -> str:
        parts = ['<div class="accessibility-report">']
        title = f": {escape(data['title'])}" if data.get("title") else ""
        parts.append(f"<h2>Accessibility Report{title}</h2>")
        parts.append(f"<p>Generated: {escape(data['generated_at'])}</p>")
        parts.append(f"<p>WCAG Version: {data['wcag_version']} Level {data['conformance_level']}</p>")
        parts.append(f"<p>Score: <strong>{data['score']}/100</strong></p>")
        parts.append(f"<p>Status: <strong>{data['compliance_status']}</strong></p>")

        for label, key in (("Errors", "errors"), ("Warnings", "warnings")):
            issues = data.get(key) or []
            if not issues:
                continue
            parts.append(f"<h3>{label} ({len(issues)})</h3><ul>")
            for issue in issues:
                parts.append(
                    f"<li><strong>[{escape(issue['criterion'])}]</strong> {escape(issue['description'])}</li>"
                )
            parts.append("</ul>")

        if data.get("remediation_actions"):
            parts.append("<h3>Remediation Actions</h3><ul>")
            for action in data["remediation_actions"]:
                parts.append(f"<li>{escape(action['action'])}</li>")
            parts.append("</ul>")

        parts.append("</div>")
        return "".join(parts)

    def format_batch_html(self, data: Dict[str, Any]) -> str:
        parts = ['<div class="batch-accessibility-report">', "<h2>Batch Accessibility Report</h2>"]
        parts.append(f"<p>Generated: {escape(data['generated_at'])}</p>")
        parts.append(f"<p>Items: {data['total_items']} | Average Score: {data['average_score']}/100</p>")
        parts.append(f"<p>Total Errors: {data['total_errors']} | Total Warnings: {data['total_warnings']}</p>")
        for item in data["items"]:
            parts.append("<hr>")
            parts.append(self.format_html(item))
        parts.append("</div>")
        return "".join(parts)


def generate_report(html: str, fmt: str = "json", title: str = "", options: OptionsInput = None) -> str:
    """Shortcut for ReportController().generate_report(...)."""
    return ReportController().generate_report(html, fmt, title, options)


def generate_batch_report(items: Iterable[Mapping[str, Any]], fmt: str = "json", options: OptionsInput = None) -> str:
    """Shortcut for ReportController().generate_batch_report(...)."""
    return ReportController().generate_batch_report(items, fmt, options)
