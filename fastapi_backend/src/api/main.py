import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api import config, db, services
from src.api.auth_utils import verify_password
from src.api.errors import AuthenticationError, NotFoundError, ValidationError, register_exception_handlers
from src.api.schemas import (
    APIMessage,
    ComparisonResult,
    ErrorBody,
    ForecastEntry,
    Instrument,
    InstrumentPayload,
    LoginRequest,
    PersonSubmission,
    PersonValidationResult,
    UserPublic,
)

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Service health checks."},
    {"name": "Playground", "description": "Forecast, lottery, comparison, sum and text endpoints."},
    {"name": "People", "description": "Person age/email validation."},
    {"name": "Instruments", "description": "CRUD for the instruments table."},
    {"name": "Auth", "description": "Email/password credential check."},
]

app = FastAPI(
    title="Playground API",
    description=(
        "Small API with toy endpoints (forecast, lottery, comparison, sum), "
        "person validation, instrument CRUD and a credential check backed by PostgreSQL."
    ),
    version="1.0.0",
    openapi_tags=openapi_tags,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

_error_responses: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorBody},
    500: {"model": ErrorBody},
}


def _required_name(payload: InstrumentPayload) -> str:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Field 'name' is required")
    return name


@app.on_event("startup")
def _startup() -> None:
    # Fails fast when no database DSN is configured.
    db.init_db_pool()


@app.on_event("shutdown")
def _shutdown() -> None:
    db.close_db_pool()


@app.get("/", response_model=APIMessage, tags=["Health"], summary="Health check")
def health_check() -> APIMessage:
    """Health check endpoint used by the frontend to verify backend availability."""
    return APIMessage(message="Healthy")


# =========================
# Playground
# =========================

@app.get("/weatherforecast", response_model=List[ForecastEntry], tags=["Playground"], summary="Weather forecast")
def get_weather_forecast() -> List[ForecastEntry]:
    """Random forecast for the next FORECAST_DAYS days."""
    return services.generate_forecast(config.forecast_days())


@app.get("/lottery", response_model=List[int], tags=["Playground"], summary="Lottery numbers")
def get_lottery_numbers() -> List[int]:
    """Six unique numbers between 1 and 60, ascending."""
    return services.draw_lottery()


@app.get("/comparar", response_model=ComparisonResult, tags=["Playground"], summary="Compare two integers", responses=_error_responses)
def comparar(
    primeiro: int = Query(..., description="First integer"),
    segundo: int = Query(..., description="Second integer"),
) -> ComparisonResult:
    return services.compare(primeiro, segundo)


@app.get("/soma", response_model=int, tags=["Playground"], summary="Sum of the configured operands")
def soma() -> int:
    a, b = config.soma_operands()
    return services.somar(a, b)


@app.get("/texto", response_class=PlainTextResponse, tags=["Playground"], summary="Literal text")
def texto() -> str:
    return "Olá, mundo!"


@app.get("/ping", response_class=PlainTextResponse, tags=["Playground"], summary="Ping")
def ping() -> str:
    return "pong"


# =========================
# People
# =========================

@app.post("/validar-pessoa", response_model=PersonValidationResult, tags=["People"], summary="Validate person", responses=_error_responses)
@app.post("/validarpessoa", response_model=PersonValidationResult, tags=["People"], include_in_schema=False)
def validar_pessoa(payload: PersonSubmission) -> PersonValidationResult:
    """Check the required fields, compute the age and look the email up in the allow-list."""
    return services.validate_person(payload.name, payload.birth_date, payload.email)


# =========================
# Instruments
# =========================

@app.get("/api/instruments", response_model=List[Instrument], tags=["Instruments"], summary="List instruments", responses=_error_responses)
def list_instruments() -> List[Dict[str, Any]]:
    return db.fetch_all("SELECT id, name FROM instruments ORDER BY id ASC")


@app.post(
    "/api/instruments",
    response_model=Instrument,
    status_code=status.HTTP_201_CREATED,
    tags=["Instruments"],
    summary="Create instrument",
    responses=_error_responses,
)
def create_instrument(payload: InstrumentPayload, response: Response) -> Dict[str, Any]:
    name = _required_name(payload)
    instrument = db.execute_returning_one(
        "INSERT INTO instruments (name) VALUES (%s) RETURNING id, name",
        [name],
    )
    response.headers["Location"] = f"/api/instruments/{instrument['id']}"
    logger.info("Created instrument %s", instrument["id"])
    return instrument


@app.put(
    "/api/instruments/{instrument_id}",
    response_model=Instrument,
    tags=["Instruments"],
    summary="Update instrument",
    responses={**_error_responses, 404: {"model": ErrorBody}},
)
def update_instrument(instrument_id: int, payload: InstrumentPayload) -> Dict[str, Any]:
    name = _required_name(payload)
    instrument = db.execute_returning_one(
        "UPDATE instruments SET name=%s WHERE id=%s RETURNING id, name",
        [name, instrument_id],
    )
    if not instrument:
        raise NotFoundError("Instrument")
    logger.info("Updated instrument %s", instrument_id)
    return instrument


@app.delete(
    "/api/instruments/{instrument_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["Instruments"],
    summary="Delete instrument",
    responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
def delete_instrument(instrument_id: int) -> Response:
    affected = db.execute("DELETE FROM instruments WHERE id=%s", [instrument_id])
    if affected == 0:
        raise NotFoundError("Instrument")
    logger.info("Deleted instrument %s", instrument_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =========================
# Auth
# =========================

@app.post(
    "/login",
    response_model=UserPublic,
    tags=["Auth"],
    summary="Login",
    responses={**_error_responses, 401: {"model": ErrorBody}},
)
def login(payload: LoginRequest) -> UserPublic:
    """Check email/password against the users table and return the public profile."""
    email = payload.email or ""
    password = payload.password or ""
    if not email.strip() or not password.strip():
        raise ValidationError("Fields 'email' and 'password' are required")

    user = db.fetch_one(
        "SELECT id, full_name, birth_date, sex, email, password_hash FROM users WHERE email=%s",
        [email],
    )
    # Unknown users still pay for a hash check.
    stored_hash = user["password_hash"] if user else None
    if not verify_password(password, stored_hash) or not user:
        logger.info("Rejected login for %s", email)
        raise AuthenticationError()

    return UserPublic(
        id=user["id"],
        full_name=user["full_name"],
        birth_date=user["birth_date"],
        sex=user["sex"],
        email=user["email"],
    )
