"""Report endpoint — relays a scan image to the vision model."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from radixpert.reports.gateway import ReportGateway, ReportRequest
from radixpert.schemas.chat import ErrorResponse
from radixpert.schemas.report import ReportPayload, ReportResponse

router = APIRouter()


def get_report_gateway(request: Request) -> ReportGateway:
    return request.app.state.report_gateway


@router.post(
    "/generate-report",
    response_model=ReportResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_report(
    req: ReportPayload,
    gateway: ReportGateway = Depends(get_report_gateway),
):
    """Generate a radiology report for an uploaded scan image."""
    result = await gateway.generate(ReportRequest(
        image_url=req.imageUrl,
        patient_name=req.patientName,
        patient_id=req.patientId,
        scan_type=req.scanType,
        file_name=req.fileName,
    ))

    if result.error is not None:
        return JSONResponse(
            status_code=result.error.status_code,
            content={"error": result.error.message},
        )

    return ReportResponse(report=result.report, report_text=result.report)
