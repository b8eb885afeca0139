import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class APIMessage(BaseModel):
    message: str = Field(..., description="Human readable message")


class ErrorBody(BaseModel):
    detail: str = Field(..., description="Human readable error message")
    code: str = Field(..., description="Machine readable error code")


class ForecastEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    temperature_c: int = Field(..., alias="temperatureC", description="Temperature in Celsius")
    temperature_f: int = Field(..., alias="temperatureF", description="Temperature in Fahrenheit")
    summary: Optional[str] = None


class ComparisonResult(BaseModel):
    mensagem: str
    primeiro: int
    segundo: int
    maior: int
    menor: int


class PersonSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional so that empty/missing values reach the validator and share one error shape.
    name: Optional[str] = None
    birth_date: Optional[str] = Field(None, alias="birthDate", description="dd/MM/yyyy, yyyy-MM-dd or dd-MM-yyyy")
    email: Optional[str] = None


class PersonValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    name: str
    age: int
    is_adult: bool = Field(..., alias="isAdult")
    email_found: bool = Field(..., alias="emailFound")


class Instrument(BaseModel):
    id: int
    name: str


class InstrumentPayload(BaseModel):
    name: Optional[str] = Field(None, description="Instrument name (required, non-blank)")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="Password")


class UserPublic(BaseModel):
    id: int
    full_name: Optional[str] = None
    birth_date: Optional[datetime.date] = None
    sex: Optional[str] = None
    email: str
