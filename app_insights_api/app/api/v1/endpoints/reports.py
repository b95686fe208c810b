"""
Report export endpoint for API v1.

``GET /reports/{report_type}`` renders one dataset for a date range as
JSON or as a downloadable CSV file.
"""

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse, Response

from app_insights_api.app.services.report_service import ReportService


router = APIRouter()


@router.get("/{report_type}")
async def generate_report(
    report_type: str,
    date_range: str = Query("30d", description="7d, 30d, 90d, 6m or 1y"),
    format: str = Query("json", description="json or csv"),
) -> Response:
    """Generate a report.

    Unknown report types, date ranges or formats yield HTTP 422.
    """
    try:
        report = await ReportService.generate(report_type, date_range=date_range, fmt=format)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    headers = {"Content-Disposition": f'attachment; filename="{report.filename}"'}
    if report.media_type == "application/json":
        return JSONResponse(content=report.content, headers=headers)
    return Response(content=report.content, media_type=report.media_type, headers=headers)
