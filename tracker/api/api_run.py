"""FastAPI app: wires the list routers, the validation error handler and the event feed."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from tracker.api.routes import checklist, delivery, dine_in, names
from tracker.events.web_observers import start as start_event_observers, get_events as get_web_events
from tracker.utilities.errors import ValidationError

load_dotenv()

# Logging
logger = logging.getLogger("tracker_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    start_event_observers()
    logger.info("Web observers for store events started")
    yield
    logger.info("Shutdown.")


# Initialize FastAPI app
app = FastAPI(title="Food Tracker API", lifespan=lifespan)

# Include routers
app.include_router(checklist.router)
app.include_router(delivery.router)
app.include_router(dine_in.router)
app.include_router(names.router)


@app.exception_handler(ValidationError)
async def _validation_error_handler(request: Request, exc: ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.get("/health")
def health():
    return {"status": "ok"}


# -------------------- API: Store events (polled by frontend) --------------------
@app.get("/api/events")
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent store events (checklist completed/reset, pruning, blocked delivery names).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_web_events(since)
