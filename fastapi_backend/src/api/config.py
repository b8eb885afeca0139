import os
from typing import FrozenSet, List, Optional, Tuple

DEFAULT_CORS_ORIGINS = "http://localhost:5173,https://localhost:5173"

FORECAST_SUMMARIES: Tuple[str, ...] = (
    "Congelante",
    "Revigorante",
    "Frio",
    "Ameno",
    "Quente",
    "Agradável",
    "Calor",
    "Escalante",
    "Torrente",
    "Abrasador",
)

# Stored lowercase; lookups lowercase the candidate.
ALLOWED_EMAILS: FrozenSet[str] = frozenset(
    {
        "ana.souza@example.com",
        "bruno.lima@example.com",
        "carla.mendes@example.com",
        "diego.alves@example.com",
        "elisa.rocha@example.com",
    }
)


# PUBLIC_INTERFACE
def required_env(name: str) -> str:
    """Return an environment variable or fail loudly if it is unset/empty."""
    value = os.getenv(name)
    if not value:
        raise RuntimeError(
            f"Missing required environment variable '{name}'. "
            "Set it in the environment or the container .env."
        )
    return value


def _int_env(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable '{name}' must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise RuntimeError(f"Environment variable '{name}' must be >= {minimum}, got {value}")
    return value


# PUBLIC_INTERFACE
def cors_allow_origins() -> List[str]:
    """Origins allowed by CORS (CORS_ALLOW_ORIGINS, comma separated)."""
    env_val = os.getenv("CORS_ALLOW_ORIGINS") or DEFAULT_CORS_ORIGINS
    return [o.strip() for o in env_val.split(",") if o.strip()]


# PUBLIC_INTERFACE
def forecast_days() -> int:
    return _int_env("FORECAST_DAYS", 5, minimum=1)


# PUBLIC_INTERFACE
def soma_operands() -> Tuple[int, int]:
    return _int_env("SOMA_A", 10), _int_env("SOMA_B", 20)


# PUBLIC_INTERFACE
def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
