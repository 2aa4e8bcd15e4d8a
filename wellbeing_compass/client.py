import requests

from wellbeing_compass import config
from wellbeing_compass.errors import ExternalCallFailure
from wellbeing_compass.models import AssessmentData


# ---------------------------
# Send the session record to the assessments endpoint
# ---------------------------
class AssessmentApiClient:
    def __init__(self, base_url: str = config.ASSESSMENTS_API_URL, timeout: float = config.REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def submit(self, record: AssessmentData) -> str:
        """POST the record; returns the stored document id."""
        url = f"{self.base_url}/assessments"
        payload = record.model_dump(mode="json", by_alias=True)

        try:
            r = requests.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ExternalCallFailure(f"Could not reach {url}", cause=e) from e

        try:
            body = r.json()
        except ValueError as e:
            raise ExternalCallFailure(f"Invalid response from {url}: {r.status_code}", cause=e) from e

        if not isinstance(body, dict):
            raise ExternalCallFailure(f"Unexpected response from {url}: {r.status_code}")

        if not r.ok or not body.get("success"):
            raise ExternalCallFailure(
                f"Saving assessment failed: {body.get('error', r.status_code)} {body.get('details', '')}".strip()
            )

        if "docId" not in body:
            raise ExternalCallFailure(f"Response from {url} has no docId")

        return body["docId"]
