"""
Burmese Numerals — FastAPI Server
=================================

RESTful API for converting between plain integers and Burmese numeral words.

Endpoints:
    POST /convert/number    "1,250,000"  → Burmese numeral phrase
    POST /convert/burmese   Burmese text → integer
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload                              # Dev (http://localhost:8000)
    BURMESE_NUMERALS_SHORTHAND=1 uvicorn api:app          # Colloquial shorthand mode

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from burmese_numerals import __version__
from burmese_numerals.config import EngineConfig
from burmese_numerals.engine import BurmeseNumeralEngine
from burmese_numerals.exceptions import InvalidNumberInput, NumberTooLarge
from burmese_numerals.models import ConversionFinding
from burmese_numerals.validators import classify_error, format_grouped, parse_standard_input

load_dotenv()


# ─── Application Lifespan (pre-warm engine) ─────────────────────────

_engine: BurmeseNumeralEngine | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the engine from the environment on startup."""
    global _engine  # noqa: PLW0603
    _engine = BurmeseNumeralEngine(EngineConfig.from_env())
    yield
    _engine = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Burmese Numerals API",
    description=(
        "Convert non-negative integers to traditional Burmese numeral words "
        "and parse Burmese numeral text back into integers."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class NumberRequest(BaseModel):
    """Request body for /convert/number."""

    value: str = Field(
        ...,
        min_length=1,
        description="Digits with optional ',' group separators.",
        json_schema_extra={"example": "102,000"},
    )


class BurmeseRequest(BaseModel):
    """Request body for /convert/burmese."""

    text: str = Field(
        ...,
        description="A Burmese numeral phrase or a run of Burmese digits.",
        json_schema_extra={"example": "တစ်သိန်း နှစ်ထောင်"},
    )


class ConversionResponse(BaseModel):
    """Both sides of a successful conversion."""

    value: int
    formatted: str = Field(description="The integer with ',' group separators")
    burmese: str

    model_config = {"json_schema_extra": {"example": {
        "value": 102000,
        "formatted": "102,000",
        "burmese": "တစ်သိန်းနှစ်ထောင်",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    shorthand_enabled: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_engine() -> BurmeseNumeralEngine:
    if _engine is None:
        raise HTTPException(status_code=503, detail="Engine not initialised")
    return _engine


def _reject(finding: ConversionFinding) -> HTTPException:
    """422 carrying the static hint plus the text that failed."""
    return HTTPException(
        status_code=422,
        detail={
            "kind": finding.kind.value,
            "message": finding.message,
            "offending_text": finding.offending_text,
        },
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert/number",
    summary="Convert a plain integer to Burmese numeral words",
    tags=["Conversion"],
    responses={
        422: {"description": "Not a valid non-negative integer, or more than 4,000 digits"},
        503: {"description": "Engine not yet initialised"},
    },
)
def convert_number(request: NumberRequest) -> ConversionResponse:
    """Accepts digits and ',' separators only (e.g. `100,000`)."""
    engine = _get_engine()
    try:
        n = parse_standard_input(request.value)
    except InvalidNumberInput as e:
        raise _reject(classify_error(e, request.value)) from e

    result = engine.convert_number(n)
    if result.error is not None:
        raise _reject(result.error)

    return ConversionResponse(value=n, formatted=format_grouped(n), burmese=result.text)


@app.post(
    "/convert/burmese",
    summary="Parse Burmese numeral text into an integer",
    tags=["Conversion"],
    responses={
        422: {"description": "Invalid Burmese number format, or a value too large to display"},
        503: {"description": "Engine not yet initialised"},
    },
)
def convert_burmese(request: BurmeseRequest) -> ConversionResponse:
    """Returns the integer plus the engine's canonical phrase for it."""
    engine = _get_engine()
    result = engine.parse_numeral_text(request.text)
    if result.error is not None:
        raise _reject(result.error)

    assert result.value is not None
    try:
        formatted = format_grouped(result.value)
    except NumberTooLarge as e:
        raise _reject(classify_error(e, request.text)) from e

    return ConversionResponse(
        value=result.value,
        formatted=formatted,
        burmese=engine.to_numeral_text(result.value),
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Engine not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    engine = _get_engine()
    return HealthResponse(
        status="healthy",
        version=__version__,
        shorthand_enabled=engine.shorthand_enabled,
    )
