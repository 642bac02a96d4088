"""Script to export a saved backend reply as a downloadable file."""
import sys
import os
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models.message import ChatMessage
from core.services.export import available_exporters, get_exporter
from core.services.normalization import ResponseParser
from core.utils.logger import logger


def export_payload(file_path: str, export_format: str, output_path: str, question: Optional[str] = None):
    """
    Normalize a saved reply body and write it out in an export format.

    Args:
        file_path: Path to the saved JSON reply body
        export_format: One of the registered export formats
        output_path: Where to write the exported file
        question: Question the reply answers, used as the document title
    """
    if not os.path.exists(file_path):
        logger.error(f"File not found: {file_path}")
        return False

    try:
        exporter = get_exporter(export_format)
    except ValueError as e:
        logger.error(f"{str(e)}. Available: {', '.join(available_exporters())}")
        return False

    try:
        with open(file_path, 'rb') as f:
            body = f.read()

        response = ResponseParser().parse_body(body, "application/json")
        content = exporter.export(ChatMessage(query=question, response=response))

        with open(output_path, 'wb') as f:
            f.write(content)

        logger.info(f"Wrote {exporter.name} export to {output_path} ({len(content)} bytes)")
        return True

    except Exception as e:
        logger.error(f"Error exporting reply {file_path}: {str(e)}")
        return False


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print("Usage: python export_response.py <payload_file> <format> <output_path> [question]")
        sys.exit(1)

    question = sys.argv[4] if len(sys.argv) > 4 else None
    success = export_payload(sys.argv[1], sys.argv[2], sys.argv[3], question)
    sys.exit(0 if success else 1)
