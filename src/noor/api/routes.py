"""API Routes."""

from datetime import date, datetime
from typing import Annotated

from babel.dates import format_date
from babel.numbers import format_currency
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic.alias_generators import to_camel

from noor.api.dependencies import AppState, get_app_state
from noor.api.schemas import (
    LocationSchema,
    MethodSchema,
    NextPrayerSchema,
    NisabResponse,
    NisabSchema,
    NisabThresholdSchema,
    PrayerTimesResponse,
    QiblaResponse,
    QiblaSchema,
    ZakatCalculationData,
    ZakatCalculationResponse,
    ZakatCalculationSchema,
    ZakatRequest,
)
from noor.domain.models import CalculationMethod, Location, NisabInfo, NisabThreshold, ZakatInput
from noor.services.prayer_service import create_prayer_service
from noor.services.qibla_service import KAABA, calculate_qibla

router = APIRouter()

Latitude = Annotated[float, Query(ge=-90, le=90, description="Latitude (-90 to 90)")]
Longitude = Annotated[float, Query(ge=-180, le=180, description="Longitude (-180 to 180)")]


def _camel_keys(amounts: dict[str, float]) -> dict[str, float]:
    return {to_camel(name): value for name, value in amounts.items()}


def _threshold_schema(threshold: NisabThreshold) -> NisabThresholdSchema:
    return NisabThresholdSchema(
        grams=threshold.grams,
        value=threshold.value,
        price_per_gram=threshold.price_per_gram,
    )


def _nisab_schema(info: NisabInfo) -> NisabSchema:
    return NisabSchema(
        gold=_threshold_schema(info.gold),
        silver=_threshold_schema(info.silver),
        recommended=info.recommended,
    )


# ============== Prayers ==============


@router.get("/prayers/methods", response_model=list[MethodSchema])
async def get_methods() -> list[MethodSchema]:
    """List supported calculation methods."""
    return [MethodSchema(id=m, name=m.display_name) for m in CalculationMethod]


@router.get("/prayers/times", response_model=PrayerTimesResponse)
async def get_prayer_times(
    latitude: Latitude,
    longitude: Longitude,
    state: Annotated[AppState, Depends(get_app_state)],
    target_date: Annotated[date | None, Query(alias="date")] = None,
    method: CalculationMethod = CalculationMethod.MWL,
) -> PrayerTimesResponse:
    """Prayer times for a location and date, with the next upcoming prayer."""
    config = state.config
    try:
        service = create_prayer_service(
            Location(latitude=latitude, longitude=longitude),
            method,
            engine=config.prayer_engine,
            fajr_isha_method=config.fajr_isha_method,
            asr_fiqh=config.asr_fiqh,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    now = datetime.now(service.timezone)
    if target_date is None:
        target_date = now.date()

    times = service.calculate(target_date)
    next_prayer = service.get_next_prayer(now, target_date)
    time_until = service.get_time_until_next_prayer(now, target_date)

    return PrayerTimesResponse(
        date=times.date,
        date_formatted=format_date(times.date, "EEEE, d MMMM yyyy", locale=config.locale),
        location=LocationSchema(latitude=latitude, longitude=longitude),
        method=MethodSchema(id=method, name=method.display_name),
        engine=service.engine,
        timezone=service.timezone_name,
        prayer_times={p.name: p.datetime for p in times.all_prayer_times()},
        next_prayer=NextPrayerSchema(name=next_prayer.name, time=next_prayer.datetime),
        time_until_next=int(time_until.total_seconds()),
    )


@router.get("/prayers/qibla", response_model=QiblaResponse)
async def get_qibla(latitude: Latitude, longitude: Longitude) -> QiblaResponse:
    """Qibla direction for a location."""
    result = calculate_qibla(Location(latitude=latitude, longitude=longitude))

    return QiblaResponse(
        location=LocationSchema(latitude=latitude, longitude=longitude),
        qibla=QiblaSchema(
            direction=result.bearing,
            bearing=result.rounded_bearing,
            compass=result.compass,
        ),
        kaaba=LocationSchema(latitude=KAABA.latitude, longitude=KAABA.longitude),
    )


# ============== Zakat ==============


@router.post("/zakat/calculate", response_model=ZakatCalculationResponse)
async def calculate_zakat(
    request: ZakatRequest,
    state: Annotated[AppState, Depends(get_app_state)],
) -> ZakatCalculationResponse:
    """Calculate zakat for the given wealth."""
    try:
        zakat_input = ZakatInput.from_dict(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    service = state.zakat_service
    result = service.calculate(zakat_input)
    info = service.nisab_info()

    if result.is_eligible:
        amount = format_currency(result.zakat_due, info.currency, locale=state.config.locale)
        message = f"Zakat calculation completed. You owe {amount} in Zakat."
    else:
        message = "Your wealth is below Nisab threshold. No Zakat is due."

    return ZakatCalculationResponse(
        success=True,
        message=message,
        data=ZakatCalculationData(
            calculation=ZakatCalculationSchema(
                total_wealth=result.total_wealth,
                nisab_value=result.nisab_value,
                zakat_due=result.zakat_due,
                is_eligible=result.is_eligible,
                breakdown=_camel_keys(result.breakdown),
                deductions=_camel_keys(result.deductions),
            ),
            nisab_info=_nisab_schema(info),
            zakat_rate=info.zakat_rate,
            currency=info.currency,
            last_updated=info.last_updated,
        ),
    )


@router.get("/zakat/nisab", response_model=NisabResponse)
async def get_nisab(state: Annotated[AppState, Depends(get_app_state)]) -> NisabResponse:
    """Current nisab values."""
    info = state.zakat_service.nisab_info()
    return NisabResponse(
        nisab=_nisab_schema(info),
        zakat_rate=info.zakat_rate,
        lunar_year_days=info.lunar_year_days,
        currency=info.currency,
        last_updated=info.last_updated,
    )
