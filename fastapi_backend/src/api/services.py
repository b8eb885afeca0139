"""
Pure request logic: forecast, lottery, comparison, sum and person validation.

Nothing here touches the database; randomness and "today" can be injected so
callers (and tests) control them.
"""
import random
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from src.api.config import ALLOWED_EMAILS, FORECAST_SUMMARIES
from src.api.errors import ValidationError
from src.api.schemas import ComparisonResult, ForecastEntry, PersonValidationResult

LOTTERY_SIZE = 6
LOTTERY_MIN = 1
LOTTERY_MAX = 60

TEMPERATURE_MIN_C = -20
TEMPERATURE_MAX_C = 55

ADULT_AGE = 18

# Tried in order after the ISO parse.
BIRTH_DATE_FORMATS = ("%d/%m/%Y", "%Y-%m-%d", "%d-%m-%Y")

_rng = random.SystemRandom()


def celsius_to_fahrenheit(celsius: int) -> int:
    return round(celsius * 9 / 5 + 32)


# PUBLIC_INTERFACE
def generate_forecast(days: int, today: Optional[date] = None, rng: Optional[random.Random] = None) -> List[ForecastEntry]:
    """Build `days` synthetic entries for today+1 .. today+days."""
    rng = rng or _rng
    today = today or date.today()
    entries = []
    for index in range(1, days + 1):
        celsius = rng.randint(TEMPERATURE_MIN_C, TEMPERATURE_MAX_C)
        entries.append(
            ForecastEntry(
                date=today + timedelta(days=index),
                temperature_c=celsius,
                temperature_f=celsius_to_fahrenheit(celsius),
                summary=rng.choice(FORECAST_SUMMARIES),
            )
        )
    return entries


# PUBLIC_INTERFACE
def draw_lottery(rng: Optional[random.Random] = None) -> List[int]:
    """Six distinct numbers from 1..60, ascending."""
    rng = rng or _rng
    return sorted(rng.sample(range(LOTTERY_MIN, LOTTERY_MAX + 1), LOTTERY_SIZE))


# PUBLIC_INTERFACE
def compare(primeiro: int, segundo: int) -> ComparisonResult:
    if primeiro == segundo:
        return ComparisonResult(
            mensagem="Os números são iguais",
            primeiro=primeiro,
            segundo=segundo,
            maior=primeiro,
            menor=segundo,
        )
    return ComparisonResult(
        mensagem="Os números são diferentes",
        primeiro=primeiro,
        segundo=segundo,
        maior=max(primeiro, segundo),
        menor=min(primeiro, segundo),
    )


# PUBLIC_INTERFACE
def somar(a: int, b: int) -> int:
    return a + b


def _require(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"Field '{field}' is required")
    return value.strip()


# PUBLIC_INTERFACE
def parse_birth_date(raw: str, formats: Iterable[str] = BIRTH_DATE_FORMATS) -> date:
    """
    Parse a birth date.

    ISO-8601 (date or datetime) is accepted first, then each entry of
    `formats` in order. Raises ValidationError when nothing matches.
    """
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Invalid birth date '{text}'. Use dd/MM/yyyy, yyyy-MM-dd or dd-MM-yyyy")


# PUBLIC_INTERFACE
def calculate_age(birth_date: date, today: date) -> int:
    """Whole years, minus one while this year's birthday is still ahead."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def is_allowed_email(email: str) -> bool:
    return email.strip().lower() in ALLOWED_EMAILS


# PUBLIC_INTERFACE
def validate_person(
    name: Optional[str],
    birth_date: Optional[str],
    email: Optional[str],
    today: Optional[date] = None,
) -> PersonValidationResult:
    name = _require(name, "name")
    raw_birth_date = _require(birth_date, "birthDate")
    email = _require(email, "email")

    today = today or date.today()
    born = parse_birth_date(raw_birth_date)
    if born > today:
        raise ValidationError("Birth date cannot be in the future")

    age = calculate_age(born, today)
    return PersonValidationResult(
        message="Pessoa validada com sucesso",
        name=name,
        age=age,
        is_adult=age >= ADULT_AGE,
        email_found=is_allowed_email(email),
    )
