from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse, Response

from app.routers.wizard import completed_assessment
from app.utils.reporting import render_assessment_pdf

router = APIRouter(tags=["reports"])


@router.get("/wizard/results.pdf")
def download_results_pdf(request: Request):
    _state, assessment = completed_assessment(request)
    if assessment is None:
        return RedirectResponse(url="/wizard", status_code=303)

    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    filename = f"talent_risk_{assessment.result.tier.css_class}_{stamp}.pdf"
    return Response(
        content=render_assessment_pdf(assessment),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
