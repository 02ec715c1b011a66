from __future__ import annotations

import io

import pandas as pd

from .service import ReportData

COLUMNS = {
    "name": "Subject",
    "code": "Code",
    "present": "Present",
    "absent": "Absent",
    "cancelled": "Cancelled",
    "total": "Total",
    "percentage": "Attendance %",
    "goal": "Goal %",
    "bunk_buffer": "Safe Bunks",
    "recovery_required": "Classes To Recover",
    "status": "Status",
    "label": "Track",
}


def report_to_dataframe(report: ReportData) -> pd.DataFrame:
    df = pd.DataFrame(report.rows, columns=list(COLUMNS))
    return df.rename(columns=COLUMNS)


def report_to_excel(report: ReportData) -> bytes:
    """Subjects sheet plus a one-row Overall sheet, as xlsx bytes."""
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        report_to_dataframe(report).to_excel(writer, sheet_name="Subjects", index=False)
        pd.DataFrame([report.summary]).to_excel(writer, sheet_name="Overall", index=False)
    return out.getvalue()
