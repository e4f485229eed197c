# src/wcag_auditor/checks/tables.py
import logging

from bs4 import Tag

from ..dom.core import get_attr, text_snippet
from ..dom.models import HTMLDocument
from ..model import CheckResult
from .base import BaseChecker

logger = logging.getLogger(__name__)


def is_layout_table(table: Tag) -> bool:
    """
    Heuristic: is this <table> used for visual layout rather than data?

    Evaluated in order: role presentation/none -> layout; a caption or a
    summary attribute -> data; any <th> -> data; a single row holding a
    single cell -> layout; anything else -> data.
    """
    role = get_attr(table, "role")
    if role in ("presentation", "none"):
        return True

    if table.find("caption") is not None or table.has_attr("summary"):
        return False

    if table.find("th") is not None:
        return False

    rows = table.find_all("tr")
    if len(rows) == 1 and len(rows[0].find_all("td")) == 1:
        return True

    return False


class TableAccessibilityChecker(BaseChecker):
    """WCAG 1.3.1 header cells, scope and captions for data tables."""
    option_key = "check_tables"
    criteria = ("1.3.1",)

    def check(self, doc: HTMLDocument) -> CheckResult:
        errors, warnings = [], []

        for table_index, table in enumerate(doc.find_all("table")):
            if is_layout_table(table):
                continue

            snippet = f"<table>...</table> (table {table_index + 1})"
            ths = table.find_all("th")

            if not ths:
                errors.append(self.error(
                    "1.3.1",
                    "Data table has no header cells (<th>).",
                    "Add <th> elements to identify header cells in the table.",
                    element=snippet,
                    table_index=table_index
                ))
            else:
                for th in ths:
                    if th.has_attr("scope"):
                        continue
                    errors.append(self.error(
                        "1.3.1",
                        "Table header cell missing scope attribute.",
                        'Add scope="col" for column headers or scope="row" for row headers.',
                        element=f"<th>{text_snippet(th.get_text().strip(), 30)}</th>",
                        table_index=table_index
                    ))

            if table.find("caption") is None:
                warnings.append(self.warning(
                    "1.3.1",
                    "Data table has no caption element.",
                    "Add a <caption> element to describe the table purpose.",
                    element=snippet,
                    table_index=table_index
                ))

        return CheckResult(errors, warnings)

    def add_scope_attributes(self, doc: HTMLDocument) -> int:
        """
        Adds header semantics to data tables and returns the number of cells changed.

        Tables without any <th> get their first row promoted to
        <th scope="col">. Existing <th> cells without scope get scope="col"
        in the first row, scope="row" when they open their row, and
        scope="col" otherwise.
        """
        changed = 0

        for table in doc.find_all("table"):
            if is_layout_table(table):
                continue

            rows = table.find_all("tr")
            if not rows:
                continue

            existing_ths = table.find_all("th")
            if not existing_ths:
                for td in rows[0].find_all("td"):
                    td.name = "th"
                    td["scope"] = "col"
                    changed += 1
                continue

            first_row_ths = rows[0].find_all("th")
            for th in existing_ths:
                if th.has_attr("scope"):
                    continue
                if any(th is first for first in first_row_ths):
                    th["scope"] = "col"
                else:
                    row = th.parent
                    first_cell = row.find(["td", "th"]) if row is not None else None
                    th["scope"] = "row" if first_cell is th else "col"
                changed += 1

        if changed:
            logger.debug("Table headers: updated %d cells", changed)
        return changed
