"""Script to normalize a saved backend reply and print the result."""
import sys
import os
import json
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.services.formatting import DisplayRenderer
from core.services.normalization import ResponseParser
from core.utils.logger import logger


def render_payload(file_path: str, content_type: str = "application/json"):
    """
    Normalize a reply body stored on disk and print its canonical form and HTML.

    Args:
        file_path: Path to the saved reply body
        content_type: Content type the body was served with
    """
    if not os.path.exists(file_path):
        logger.error(f"File not found: {file_path}")
        return False

    try:
        with open(file_path, 'rb') as f:
            body = f.read()

        response = ResponseParser().parse_body(body, content_type)
        html = DisplayRenderer().render(response)

        print(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))
        print()
        print(html)
        return True

    except Exception as e:
        logger.error(f"Error rendering reply {file_path}: {str(e)}")
        return False


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python render_response.py <payload_file> [content_type]")
        sys.exit(1)

    file_path = sys.argv[1]
    content_type = sys.argv[2] if len(sys.argv) > 2 else "application/json"
    success = render_payload(file_path, content_type)
    sys.exit(0 if success else 1)
