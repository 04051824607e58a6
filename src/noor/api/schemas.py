"""Pydantic schemas for API."""

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from noor.domain.models import CalculationMethod, NisabStandard, PrayerName

Amount = Annotated[float, Field(ge=0, allow_inf_nan=False, strict=True)]


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationSchema(CamelModel):
    """Coordinate schema."""

    latitude: Annotated[float, Field(ge=-90, le=90, description="Latitude")]
    longitude: Annotated[float, Field(ge=-180, le=180, description="Longitude")]


class MethodSchema(CamelModel):
    """Calculation method schema."""

    id: CalculationMethod
    name: str


class NextPrayerSchema(CamelModel):
    """Upcoming prayer."""

    name: PrayerName
    time: datetime


class PrayerTimesResponse(CamelModel):
    """Prayer times of one day at one location."""

    date: date
    date_formatted: str
    location: LocationSchema
    method: MethodSchema
    engine: str
    timezone: str
    prayer_times: dict[PrayerName, datetime]
    next_prayer: NextPrayerSchema
    time_until_next: int = Field(description="Seconds until the next prayer")


class QiblaSchema(CamelModel):
    """Qibla direction."""

    direction: float = Field(description="Bearing in degrees from true north")
    bearing: int = Field(description="Bearing rounded to whole degrees")
    compass: str


class QiblaResponse(CamelModel):
    """Qibla direction from a location."""

    location: LocationSchema
    qibla: QiblaSchema
    kaaba: LocationSchema


class ZakatRequest(CamelModel):
    """Zakat calculation input. Omitted fields count as zero."""

    cash: Amount = 0.0
    gold: Amount = 0.0
    silver: Amount = 0.0
    investments: Amount = 0.0
    business_assets: Amount = 0.0
    receivables: Amount = 0.0
    cryptocurrency: Amount = 0.0
    other: Amount = 0.0
    personal_debts: Amount = 0.0
    business_debts: Amount = 0.0
    immediate_expenses: Amount = 0.0


class ZakatCalculationSchema(CamelModel):
    """Zakat calculation result."""

    total_wealth: float
    nisab_value: float
    zakat_due: float
    is_eligible: bool
    breakdown: dict[str, float]
    deductions: dict[str, float]


class NisabThresholdSchema(CamelModel):
    """Nisab in one metal."""

    grams: float
    value: float
    price_per_gram: float


class NisabSchema(CamelModel):
    """Gold and silver nisab."""

    gold: NisabThresholdSchema
    silver: NisabThresholdSchema
    recommended: NisabStandard


class NisabResponse(CamelModel):
    """Current nisab values."""

    nisab: NisabSchema
    zakat_rate: float
    lunar_year_days: int
    currency: str
    last_updated: datetime


class ZakatCalculationData(CamelModel):
    """Payload of a zakat calculation response."""

    calculation: ZakatCalculationSchema
    nisab_info: NisabSchema
    zakat_rate: float
    currency: str
    last_updated: datetime


class ZakatCalculationResponse(CamelModel):
    """Zakat calculation response."""

    success: bool
    message: str
    data: ZakatCalculationData
