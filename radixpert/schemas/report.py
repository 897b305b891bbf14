"""Request/response schemas for the report endpoint."""

from pydantic import BaseModel


class ReportPayload(BaseModel):
    imageUrl: str | None = None
    patientName: str | None = None
    patientId: str | None = None
    scanType: str | None = None
    fileName: str | None = None


class ReportResponse(BaseModel):
    report: str
    report_text: str
