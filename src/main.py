"""
Guest check script.

Connects to the Firebase project configured in .env.local, fetches a small
sample of guests and prints each guest's `confirmed` value together with the
type it is actually stored as.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from src.utils.firebase_config import FirebaseConfig
from src.utils.firestore_client import FirestoreClient
from src.utils.value_display import MISSING, display_value, type_label

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

# Configuration
COLLECTION_NAME = "guests"
SAMPLE_SIZE = 5


def format_guest(data: Dict[str, Any]) -> List[str]:
    """Build the report lines for one guest document."""
    name = data.get("name", MISSING)
    confirmed = data.get("confirmed", MISSING)
    return [
        f"{display_value(name)}:",
        f"  confirmed: {display_value(confirmed)} (type: {type_label(confirmed)})",
        "",
    ]


def check_guests(client: FirestoreClient, out: Optional[TextIO] = None) -> int:
    """
    Print a sample of guests and the stored type of their confirmation.

    Args:
        client: Client used to run the query
        out: Stream to write the report to (defaults to stdout)

    Returns:
        Number of guests printed
    """
    out = out or sys.stdout
    documents = client.run_query(COLLECTION_NAME, limit=SAMPLE_SIZE)

    print(f"Sample of {SAMPLE_SIZE} {COLLECTION_NAME}:\n", file=out)
    for data in documents:
        for line in format_guest(data):
            print(line, file=out)

    return len(documents)


def main():
    """Main entry point."""
    config = FirebaseConfig.from_env()
    logger.info(f"Project: {config.project_id}")

    with FirestoreClient(config) as client:
        check_guests(client)

    sys.exit(0)


if __name__ == "__main__":
    main()
