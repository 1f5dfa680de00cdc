"""Render report payloads as downloadable Excel workbooks and PDF documents.

Excel files are written with pandas through the openpyxl engine; PDFs are
laid out with reportlab's platypus flowables.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Sequence
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..common.money import format_amount
from ..core.enums import ExportFormat
from ..core.exceptions import ValidationError
from ..payroll.service import Payslip
from .model import ExpenseReport, FinancialReport, PayrollReport, Period

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIMETYPE = "application/pdf"


@dataclass(frozen=True)
class ExportFile:
    content: bytes
    filename: str
    mimetype: str


@dataclass(frozen=True)
class Tabular:
    """Format-neutral view of a report: totals plus one detail table."""

    title: str
    period: Period
    summary: list[tuple[str, str]]
    detail_sheet: str
    columns: list[str]
    rows: list[list]


def parse_format(value: str | None) -> ExportFormat:
    try:
        return ExportFormat((value or ExportFormat.XLSX.value).strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in ExportFormat)
        raise ValidationError(f"Unsupported export format {value!r} (expected one of: {allowed})")


def financial_table(report: FinancialReport) -> Tabular:
    rows = [["Income", r.occurred_on.isoformat(), r.source, format_amount(r.amount)] for r in report.income]
    rows += [["Expense", e.occurred_on.isoformat(), e.description, format_amount(-e.amount)] for e in report.expenses]
    rows.sort(key=lambda row: row[1], reverse=True)
    return Tabular(
        title="Financial Report",
        period=report.period,
        summary=[
            ("Total Income", format_amount(report.total_income)),
            ("Total Expenses", format_amount(report.total_expenses)),
            ("Net Profit", format_amount(report.net_profit)),
        ],
        detail_sheet="Transactions",
        columns=["Type", "Date", "Description", "Amount"],
        rows=rows,
    )


def expense_table(report: ExpenseReport) -> Tabular:
    summary = [("Total Amount", format_amount(report.total_amount))]
    summary += [
        (f"{c.category_name} ({c.count})", format_amount(c.total)) for c in report.expenses_by_category
    ]
    return Tabular(
        title="Expense Report",
        period=report.period,
        summary=summary,
        detail_sheet="Expenses",
        columns=["Date", "Description", "Category", "Amount", "Notes"],
        rows=[
            [
                line.expense.occurred_on.isoformat(),
                line.expense.description,
                line.category_name,
                format_amount(line.expense.amount),
                line.expense.notes or "",
            ]
            for line in report.expenses
        ],
    )


def payroll_table(report: PayrollReport) -> Tabular:
    summary = [
        ("Total Gross", format_amount(report.total_gross_amount)),
        ("Total Deductions", format_amount(report.total_deductions)),
        ("Total Net", format_amount(report.total_net_amount)),
    ]
    summary += [
        (f"{d.department} ({d.count})", format_amount(d.total_net)) for d in report.payroll_by_department
    ]
    return Tabular(
        title="Payroll Report",
        period=report.period,
        summary=summary,
        detail_sheet="Payroll",
        columns=["Employee", "Department", "Period", "Processed", "Gross", "Deductions", "Net", "Status"],
        rows=[
            [
                line.employee_name,
                line.department,
                f"{line.record.pay_period_start.isoformat()} - {line.record.pay_period_end.isoformat()}",
                line.record.processed_on.isoformat(),
                format_amount(line.record.gross_amount),
                format_amount(line.record.deductions),
                format_amount(line.record.net_amount),
                line.record.status.value,
            ]
            for line in report.payroll_records
        ],
    )


def to_xlsx(table: Tabular) -> bytes:
    summary = pd.DataFrame(
        [("Period", table.period.label()), *table.summary], columns=["Metric", "Value"]
    )
    detail = pd.DataFrame(table.rows, columns=table.columns)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        summary.to_excel(writer, index=False, sheet_name="Summary")
        detail.to_excel(writer, index=False, sheet_name=table.detail_sheet)
    return output.getvalue()


_GRID = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1f3b57")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
)


def _render_pdf(title: str, flowables: list) -> bytes:
    output = io.BytesIO()
    doc = SimpleDocTemplate(
        output, pagesize=A4, title=title, leftMargin=15 * mm, rightMargin=15 * mm, topMargin=15 * mm
    )
    doc.build(flowables)
    return output.getvalue()


def _grid(header: Sequence[str], rows: Sequence[Sequence]) -> Table:
    table = Table([list(header), *[[str(v) for v in row] for row in rows]], repeatRows=1)
    table.setStyle(_GRID)
    return table


def to_pdf(table: Tabular) -> bytes:
    styles = getSampleStyleSheet()
    flowables = [
        Paragraph(table.title, styles["Title"]),
        Paragraph(f"Period: {table.period.label()}", styles["Normal"]),
        Spacer(1, 6 * mm),
        _grid(["Metric", "Value"], table.summary),
        Spacer(1, 6 * mm),
    ]
    if table.rows:
        flowables.append(_grid(table.columns, table.rows))
    else:
        flowables.append(Paragraph("No records for this period.", styles["Italic"]))
    return _render_pdf(table.title, flowables)


def export_report(table: Tabular, fmt: ExportFormat, *, basename: str) -> ExportFile:
    if fmt == ExportFormat.PDF:
        return ExportFile(content=to_pdf(table), filename=f"{basename}.pdf", mimetype=PDF_MIMETYPE)
    return ExportFile(content=to_xlsx(table), filename=f"{basename}.xlsx", mimetype=XLSX_MIMETYPE)


def payslip_pdf(payslip: Payslip) -> ExportFile:
    record = payslip.record
    employee = payslip.employee
    styles = getSampleStyleSheet()

    details = [
        ("Employee", employee.name if employee else f"#{record.employee_id}"),
        ("Position", employee.position if employee else "-"),
        ("Department", employee.department if employee else "-"),
        ("Pay period", f"{record.pay_period_start.isoformat()} to {record.pay_period_end.isoformat()}"),
        ("Processed on", record.processed_on.isoformat()),
        ("Status", record.status.value),
    ]
    amounts = [
        ("Gross pay", format_amount(record.gross_amount)),
        ("Deductions", format_amount(record.deductions)),
        ("Net pay", format_amount(record.net_amount)),
    ]

    flowables = [
        Paragraph("Payslip", styles["Title"]),
        _grid(["", ""], details),
        Spacer(1, 6 * mm),
        _grid(["Item", "Amount"], amounts),
    ]
    if record.notes:
        flowables += [Spacer(1, 4 * mm), Paragraph(f"Notes: {escape(record.notes)}", styles["Normal"])]

    return ExportFile(
        content=_render_pdf(f"Payslip {record.id}", flowables),
        filename=f"payslip-{record.id}.pdf",
        mimetype=PDF_MIMETYPE,
    )
