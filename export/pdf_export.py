"""Affordability summary PDF."""
from __future__ import annotations
import io
import logging
from typing import Optional

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.utils import format_currency, format_pct
from loanfit.models import AffordabilityProfile, EligibilityResult
from loanfit.presets import DISCLAIMER

logger = logging.getLogger(__name__)

GRID_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)
SCHEDULE_PREVIEW_ROWS = 12


def _grid(rows, col_widths=None) -> Table:
    t = Table(rows, hAlign="LEFT", colWidths=col_widths)
    t.setStyle(GRID_STYLE)
    return t


def build_summary_pdf(
    profile: AffordabilityProfile,
    result: Optional[EligibilityResult] = None,
    max_loan: Optional[int] = None,
    schedule: Optional[pd.DataFrame] = None,
    title: str = "Loan Affordability Summary",
) -> bytes:
    """Render the applicant, the verdict and/or max loan as PDF bytes.

    At least one of ``result`` or ``max_loan`` is required.  Only the first
    year of ``schedule`` is printed.
    """

    if result is None and max_loan is None:
        raise ValueError("result or max_loan required to build a summary")

    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = [Paragraph(f"<b>{title}</b>", styles["Title"]), Spacer(1, 12)]

    applicant = [["Applicant", ""]] + [
        [name.replace("_", " ").title(), "" if value is None else f"{value}"]
        for name, value in profile.model_dump().items()
    ]
    story += [_grid(applicant, [200, 300]), Spacer(1, 12)]

    if result is not None:
        verdict = [
            ["Eligibility", ""],
            ["Decision", "Eligible" if result.eligible else "Not Eligible"],
            ["Rule", result.code],
            ["Reason", result.reason],
        ]
        if result.emi is not None:
            verdict.append(["EMI", format_currency(result.emi)])
        if result.dti is not None:
            verdict.append(["DTI", format_pct(result.dti)])
        story += [_grid(verdict, [200, 300]), Spacer(1, 12)]

    if max_loan is not None:
        text = format_currency(max_loan) if max_loan > 0 else "No loan recommended"
        story += [_grid([["Maximum Loan", ""], ["Principal", text]], [200, 300]), Spacer(1, 12)]

    if schedule is not None and not schedule.empty:
        head = schedule.head(SCHEDULE_PREVIEW_ROWS)
        rows = [list(head.columns)] + [
            [int(r.Month)] + [f"{v:,.2f}" for v in (r.Payment, r.Interest, r.Principal, r.Balance)]
            for r in head.itertuples(index=False)
        ]
        story += [
            Paragraph("<b>Amortization (first year)</b>", styles["Heading3"]),
            Spacer(1, 6),
            _grid(rows),
            Spacer(1, 12),
        ]

    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
    logger.debug("built summary pdf (%d bytes)", buf.tell())
    return buf.getvalue()
