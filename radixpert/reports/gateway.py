"""Report generation relay: image + patient metadata in, report text out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from radixpert.errors import (
    ConfigurationError,
    InputValidationError,
    RadixpertError,
    TransportError,
)
from radixpert.prompts import REPORT_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred while generating the report"


@dataclass(frozen=True)
class ReportRequest:
    image_url: str | None
    patient_name: str | None = None
    patient_id: str | None = None
    scan_type: str | None = None
    file_name: str | None = None


@dataclass(frozen=True)
class ReportResult:
    """Either a generated report or the error that prevented it."""

    report: str | None = None
    error: RadixpertError | None = None

    def __post_init__(self) -> None:
        if (self.report is None) == (self.error is None):
            raise ValueError("ReportResult needs exactly one of report or error")

    @property
    def ok(self) -> bool:
        return self.error is None


class VisionCompletion(Protocol):
    api_key: str

    async def complete(self, prompt: str, image_url: str) -> str: ...


def build_report_prompt(request: ReportRequest) -> str:
    return REPORT_PROMPT_TEMPLATE.format(
        patient_id=request.patient_id or "N/A",
        patient_name=request.patient_name or "N/A",
        file_name=request.file_name or "N/A",
        scan_type=request.scan_type or "Unknown",
    )


class ReportGateway:
    """Validates a report request and relays it to the vision model once."""

    def __init__(self, client: VisionCompletion) -> None:
        self.client = client

    async def generate(self, request: ReportRequest) -> ReportResult:
        if not self.client.api_key:
            logger.error("OPENAI_API_KEY is not configured")
            return ReportResult(
                error=ConfigurationError("OpenAI API key is not configured.")
            )

        if not request.image_url:
            logger.warning("Report request rejected: missing image URL")
            return ReportResult(error=InputValidationError("Image URL is required."))

        logger.info(
            "Generating report for patient %s (scan type %s)",
            request.patient_id or "N/A",
            request.scan_type or "unknown",
        )
        prompt = build_report_prompt(request)

        try:
            report = await self.client.complete(prompt, request.image_url)
        except RadixpertError as e:
            return ReportResult(error=e)
        except Exception as e:
            logger.exception("Report generation failed: %s", e)
            return ReportResult(error=TransportError(str(e) or DEFAULT_ERROR_MESSAGE))

        logger.info("Report generated for patient %s", request.patient_id or "N/A")
        return ReportResult(report=report)
