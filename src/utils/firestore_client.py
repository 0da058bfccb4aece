"""
Firestore utility module for queries against a Firebase project.

Requests are unauthenticated, so access is decided by the project's security
rules. A FIRESTORE_EMULATOR_HOST set in the environment is picked up by the
SDK and redirects all queries to the emulator.
"""

import logging
from typing import Optional, List, Dict, Any

from google.auth.credentials import AnonymousCredentials
from google.cloud import firestore

from src.utils.firebase_config import FirebaseConfig

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "(default)"


class FirestoreClient:
    """A wrapper class for Firestore operations."""

    def __init__(
        self,
        config: FirebaseConfig,
        database_id: str = DEFAULT_DATABASE,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the Firestore client.

        Args:
            config: Firebase project configuration
            database_id: Firestore database inside the project
            timeout: Request timeout in seconds (None leaves it to the SDK)
        """
        self.config = config
        self.database_id = database_id
        self.timeout = timeout
        self.client: Optional[firestore.Client] = None

    def connect(self) -> firestore.Client:
        """
        Create the underlying Firestore client.

        Returns:
            firestore.Client instance
        """
        if self.client is None:
            self.client = firestore.Client(
                project=self.config.project_id,
                credentials=AnonymousCredentials(),
                database=self.database_id,
            )
        return self.client

    def close(self) -> None:
        """Close the Firestore client."""
        if self.client:
            self.client.close()
            self.client = None

    def run_query(self, collection_name: str, limit: int) -> List[Dict[str, Any]]:
        """
        Fetch documents from a collection.

        No filter or ordering is applied, so documents come back in the
        service's default order.

        Args:
            collection_name: Name of the collection
            limit: Maximum number of documents to return

        Returns:
            Field data of each returned document
        """
        client = self.connect()
        query = client.collection(collection_name).limit(limit)

        logger.info(
            f"Querying '{collection_name}' (limit {limit}) in project {self.config.project_id}"
        )
        documents = [snapshot.to_dict() for snapshot in query.stream(timeout=self.timeout)]

        logger.info(f"Received {len(documents)} document(s)")
        return documents

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
