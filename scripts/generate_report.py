"""Generate a radiology report for a single image URL.

Usage:
    python scripts/generate_report.py IMAGE_URL [--patient-id ID]
        [--patient-name NAME] [--scan-type TYPE] [--file-name NAME]

Requires OPENAI_API_KEY. Prints the report on stdout, or the error on
stderr with a non-zero exit code.
"""

import argparse
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from radixpert.clients.openai_vision import VisionClient
from radixpert.config import Settings
from radixpert.reports.gateway import ReportGateway, ReportRequest

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("image_url")
    parser.add_argument("--patient-id")
    parser.add_argument("--patient-name")
    parser.add_argument("--scan-type")
    parser.add_argument("--file-name")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    client = VisionClient(Settings())
    gateway = ReportGateway(client)

    try:
        result = await gateway.generate(ReportRequest(
            image_url=args.image_url,
            patient_name=args.patient_name,
            patient_id=args.patient_id,
            scan_type=args.scan_type,
            file_name=args.file_name,
        ))
    finally:
        await client.close()

    if result.error is not None:
        print(f"Report generation failed: {result.error.message}", file=sys.stderr)
        return 1

    print(result.report)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
