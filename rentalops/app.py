"""FastAPI application — HTTP endpoints for turnover scheduling.

Endpoints:

  POST /api/schedule/suggest   Suggest slots for a task on one unit's calendar
  GET  /health                 Health check

A suggestion request carries the task's urgency, the unit calendar as
``{"start", "end"}`` ISO-8601 pairs and, optionally, an explicit ``now``
and property timezone.  Bad calendars and unknown urgencies come back as
400 with a ``detail`` message.
"""

from __future__ import annotations

from dotenv import load_dotenv
load_dotenv()

import logging
import time

# Configure root logger early so all app loggers have a handler and are
# visible when run via `uvicorn rentalops.app:app`.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)-20s %(levelname)-7s %(message)s",
)

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rentalops.config import settings
from rentalops.errors import ConfigurationError, InvalidUrgencyError, ParseError
from rentalops.models.schedule import ScheduleRequest, ScheduleResponse
from rentalops.service import resolve_urgency, suggest_for_task

log = logging.getLogger("rentalops.app")

_START_TIME = time.time()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Rental Ops Scheduler",
        description="Turnover-aware scheduling suggestions for rental tasks",
        version="0.1.0",
    )

    # ── Error mapping ──────────────────────────────────────────

    @app.exception_handler(ParseError)
    @app.exception_handler(InvalidUrgencyError)
    @app.exception_handler(ConfigurationError)
    async def bad_request(request: Request, exc: Exception) -> JSONResponse:
        log.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # ── Health check ───────────────────────────────────────────

    @app.get("/health")
    async def health() -> JSONResponse:
        uptime = round(time.time() - _START_TIME, 1)
        return JSONResponse({"status": "ok", "uptime": uptime})

    # ── Schedule suggestions ───────────────────────────────────

    @app.post("/api/schedule/suggest", response_model=ScheduleResponse)
    async def suggest(body: ScheduleRequest) -> ScheduleResponse:
        """Suggest slots for one task.

        An omitted urgency falls back to ``settings.default_urgency``; an
        omitted ``now`` means the current time in the property timezone.
        """
        urgency = resolve_urgency(body.urgency)
        suggestions = suggest_for_task(
            urgency,
            body.reservations,
            body.now,
            tz=body.timezone,
        )
        log.info(
            "Schedule suggestion: urgency=%s reservations=%d -> %s",
            urgency.value, len(body.reservations), suggestions,
        )
        return ScheduleResponse(urgency=urgency.value, suggestions=suggestions)

    return app


# ── Module-level app instance for uvicorn ──────────────────────

app = create_app()


if __name__ == "__main__":
    import uvicorn

    for warning in settings.validate_startup():
        log.warning(warning)

    logging.getLogger().setLevel(settings.log_level.upper())

    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["formatters"]["default"]["fmt"] = (
        "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"
    )

    uvicorn.run(
        "rentalops.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=log_config,
    )
