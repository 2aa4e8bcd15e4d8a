import logging
import uuid
from datetime import datetime, timezone

import requests

from wellbeing_compass import config

logger = logging.getLogger(__name__)

# Realtime Database fills this in with its own clock on write
SERVER_TIMESTAMP = {".sv": "timestamp"}


class StoreWriteError(Exception):
    pass


def new_doc_id() -> str:
    return uuid.uuid4().hex


def build_document(data: dict, user_id=None) -> dict:
    return {
        **data,
        "createdAt": SERVER_TIMESTAMP,
        "userId": user_id,
    }


# ---------------------------
# Save assessment documents in firebase
# ---------------------------
class FirebaseStore:
    def __init__(self, db_url=config.FIREBASE_DB_URL, node=config.ASSESSMENTS_NODE,
                 auth_token=config.FIREBASE_AUTH_TOKEN, timeout=config.REQUEST_TIMEOUT):
        self.db_url = db_url.rstrip("/")
        self.node = node.strip("/")
        self.auth_token = auth_token
        self.timeout = timeout

    def save(self, doc_id: str, document: dict) -> None:
        url = f"{self.db_url}/{self.node}/{doc_id}.json"
        params = {"auth": self.auth_token} if self.auth_token else None

        try:
            # PUT = create or replace at a known key
            r = requests.put(url, json=document, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise StoreWriteError(f"Firebase request failed: {e}") from e

        if not r.ok:
            raise StoreWriteError(f"Firebase write failed: {r.status_code} {r.text}")


class InMemoryStore:
    """Process-local store for development and tests."""

    def __init__(self):
        self.documents = {}

    def save(self, doc_id: str, document: dict) -> None:
        stored = dict(document)
        if stored.get("createdAt") == SERVER_TIMESTAMP:
            stored["createdAt"] = datetime.now(timezone.utc).isoformat()
        self.documents[doc_id] = stored


def save_assessment(store, data: dict, user_id=None) -> str:
    """Store the document under the user's id when known, otherwise a fresh id."""
    doc_id = user_id or new_doc_id()
    store.save(doc_id, build_document(data, user_id))
    logger.info("Assessment data saved for docId: %s", doc_id)
    return doc_id
