import json
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from wellbeing_compass import config
from wellbeing_compass.firebase import FirebaseStore, StoreWriteError, save_assessment
from wellbeing_compass.logging_config import setup_logging
from wellbeing_compass.models import SaveErrorResponse, SaveResponse

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Wellbeing Compass API", version="1.0")


@lru_cache
def get_store():
    return FirebaseStore()


def _error(status_code, error, details):
    body = SaveErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


# ---------------------------
# API Endpoint
# ---------------------------
@app.post("/assessments", response_model=SaveResponse)
async def save_assessment_data(request: Request, store=Depends(get_store)):
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return _error(400, "Invalid JSON body.", str(e))

    if not isinstance(data, dict):
        return _error(400, "Invalid JSON body.", "Expected a JSON object")

    # No sign-in, so there is never a user id to key the document by
    try:
        doc_id = save_assessment(store, data, user_id=None)
    except StoreWriteError as e:
        logger.error("Error saving assessment data: %s", e)
        return _error(500, "Failed to save assessment data.", str(e))

    return SaveResponse(success=True, doc_id=doc_id)
