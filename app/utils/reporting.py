from __future__ import annotations

from datetime import datetime, timezone
from html import escape
from io import BytesIO
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.config import get_settings
from app.services.presentation import indicator_rows
from talent_risk.core import Assessment

_BAND_COLORS = {
    "low": colors.HexColor("#DCFCE7"),
    "moderate": colors.HexColor("#FEF3C7"),
    "high": colors.HexColor("#FEE2E2"),
}


def _pdf_text(value: Any) -> str:
    return escape(" ".join(str(value or "").split()).strip())


def _answer_rows(assessment: Assessment) -> list[list[str]]:
    labels = assessment.answer_labels()
    return [
        ["Question", "Answer"],
        ["Firm size", labels.get("firm_size", "")],
        ["Bilingual client exposure", labels.get("bilingual_exposure", "")],
        ["Region", labels.get("region", "")],
        ["Hiring pressure", labels.get("hiring_pressure", "")],
    ]


def render_assessment_pdf(assessment: Assessment) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=28, rightMargin=28, topMargin=24, bottomMargin=24)
    styles = getSampleStyleSheet()
    body_style = ParagraphStyle(
        "AssessmentBody",
        parent=styles["BodyText"],
        textColor=colors.black,
        fontSize=9.5,
        leading=13,
    )
    result = assessment.result
    interpretation = assessment.interpretation

    story: list[Any] = []
    story.append(Paragraph(f"{_pdf_text(get_settings().app_name)} - Capability Resilience Report", styles["Title"]))
    story.append(
        Paragraph(f"Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M')} UTC", styles["Normal"])
    )
    story.append(Spacer(1, 10))

    answers_table = Table(_answer_rows(assessment), colWidths=[170, 330], hAlign="LEFT")
    answers_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#111827")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("BACKGROUND", (0, 1), (-1, -1), colors.HexColor("#F8FAFC")),
            ]
        )
    )
    story.append(answers_table)
    story.append(Spacer(1, 10))

    story.append(Paragraph(f"Risk level: {_pdf_text(result.tier.label)} ({result.score:.1f}/100)", styles["Heading2"]))
    story.append(Paragraph(_pdf_text(result.description), body_style))
    story.append(Spacer(1, 8))

    rows = indicator_rows(result)
    indicator_table = Table(
        [["Indicator", "Value"]] + [[row["display_name"], f"{row['percent']}%"] for row in rows],
        colWidths=[250, 80],
        hAlign="LEFT",
    )
    indicator_styles: list[tuple[Any, ...]] = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#111827")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
    for index, row in enumerate(rows, start=1):
        indicator_styles.append(("BACKGROUND", (1, index), (1, index), _BAND_COLORS[row["band"]]))
    indicator_table.setStyle(TableStyle(indicator_styles))
    story.append(indicator_table)
    story.append(Spacer(1, 10))

    story.append(Paragraph("Strategic interpretation", styles["Heading2"]))
    story.append(
        Paragraph(f"<b>Capability resilience assessment:</b> {_pdf_text(interpretation.opening)}", body_style)
    )
    story.append(Spacer(1, 4))
    story.append(Paragraph("<b>Strategic recommendations:</b>", body_style))
    for item in interpretation.recommendations:
        story.append(Paragraph(f"- {_pdf_text(item)}", body_style))
    story.append(Spacer(1, 4))
    story.append(Paragraph(f"<b>Market intelligence:</b> {_pdf_text(interpretation.market_context)}", body_style))
    story.append(Spacer(1, 10))

    story.append(Paragraph("Market heatmap", styles["Heading2"]))
    heatmap_table = Table(
        [["Region", "Tension", "Signal"]]
        + [[row.region_label, row.label, row.description] for row in assessment.heatmap_rows],
        colWidths=[150, 130, 220],
        hAlign="LEFT",
    )
    heatmap_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#111827")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ]
            + [
                ("BACKGROUND", (1, index), (1, index), _BAND_COLORS[row.level])
                for index, row in enumerate(assessment.heatmap_rows, start=1)
            ]
        )
    )
    story.append(heatmap_table)
    story.append(Spacer(1, 8))
    story.append(
        Paragraph(
            "Strategic modelling based on public labour market signals. No internal HR data is accessed or claimed.",
            body_style,
        )
    )

    doc.build(story)
    return buffer.getvalue()
