"""FastAPI server — HTTP access to the projection engine.

Run with:
    uvicorn compound_projector.api.server:app --reload --port 8000

Or:
    python -m compound_projector.api.server

Endpoints:
    GET  /health            — liveness probe
    GET  /schema            — JSON Schema for ProjectionInputs
    GET  /inputs/defaults   — default ProjectionInputs as JSON
    POST /project           — run a projection from typed inputs
    POST /project/form      — run a projection from raw form strings
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from compound_projector import __version__
from compound_projector.api.narrative import generate_narrative
from compound_projector.config.form import CalculatorForm
from compound_projector.config.inputs import ProjectionInputs
from compound_projector.config.settings import AppSettings
from compound_projector.engine.projection import project
from compound_projector.errors import InvalidInput
from compound_projector.logging_setup import configure_logging
from compound_projector.models.results import ProjectionResult, SummaryFigures, TableRow
from compound_projector.presentation.views import summary_figures, table_rows

logger = logging.getLogger(__name__)

settings = AppSettings.from_env()


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Compound Interest Projector API",
    version=__version__,
    description=(
        "Month-by-month compound-interest projection. Send an initial amount, "
        "an annual rate, a monthly or yearly deposit and a duration; get back "
        "the full series, headline totals and an after-tax summary."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def _handle_invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
    """Engine and collector rejections become 422s, like pydantic's own."""
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Response models
# ═══════════════════════════════════════════════════════════════════════════

class ProjectionResponse(BaseModel):
    """Response from /project and /project/form."""
    inputs: ProjectionInputs
    result: ProjectionResult
    summary: SummaryFigures
    table: list[TableRow] = Field(
        description="Rows as displayed: every month for monthly deposits, "
                    "year-ends only for yearly deposits.",
    )
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _check_horizon(inputs: ProjectionInputs) -> None:
    if inputs.total_months > settings.max_total_months:
        raise InvalidInput([
            f"duration: {inputs.total_months} months exceeds the "
            f"{settings.max_total_months}-month limit"
        ])


def _check_yearly_unit(inputs: ProjectionInputs) -> None:
    # Yearly deposits are only defined over whole years.
    if inputs.deposit_frequency == "yearly" and inputs.duration_unit != "years":
        raise InvalidInput([
            "duration_unit: yearly deposits require duration_unit='years', "
            f"got {inputs.duration_unit!r}"
        ])


def _respond(inputs: ProjectionInputs) -> ProjectionResponse:
    result = project(inputs)
    return ProjectionResponse(
        inputs=inputs,
        result=result,
        summary=summary_figures(result),
        table=table_rows(result, inputs.deposit_frequency),
        narrative=generate_narrative(inputs, result, settings.currency_symbol),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version and where to start."""
    return {
        "name": "Compound Interest Projector API",
        "version": __version__,
        "start_here": "GET /inputs/defaults, then POST /project",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for ProjectionInputs — field types, defaults, descriptions."""
    return ProjectionInputs.model_json_schema()


@app.get("/inputs/defaults")
def get_defaults():
    """Default ProjectionInputs. Use as a starting point for modifications."""
    return ProjectionInputs().model_dump()


@app.post("/project", response_model=ProjectionResponse)
def run_projection(inputs: ProjectionInputs):
    """Run a projection from typed inputs.

    Example request:
    ```json
    {"initial_amount": 1000, "annual_interest_rate_pct": 5,
     "deposit_frequency": "monthly", "duration_unit": "years",
     "duration": 10, "periodic_deposit": 200}
    ```
    """
    _check_yearly_unit(inputs)
    _check_horizon(inputs)
    return _respond(inputs)


@app.post("/project/form", response_model=ProjectionResponse)
def run_projection_from_form(form: CalculatorForm):
    """Run a projection from raw form strings (blank principal/rate count as zero)."""
    inputs = form.to_inputs(max_total_months=settings.max_total_months)
    return _respond(inputs)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging(settings.log_level)
    uvicorn.run(
        "compound_projector.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
