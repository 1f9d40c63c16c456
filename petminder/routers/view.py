# Estado de vista: filtros, fecha seleccionada, tira semanal y formato de horas
from fastapi import APIRouter, Depends, Query
from typing import List, Literal
from datetime import date

from ..agenda import classify_time_slot, time_slot_icon, time_slot_label
from ..schemas.reminder import (
    TIME_PATTERN, CalendarDate, FilterOptions, SelectedDate, SelectedDateOut, TimeDisplay,
)
from ..state import get_store
from ..store import ReminderStore
from ..utils import (
    current_date_string, format_time, from_24_hour, get_week_dates,
    is_date_in_future, is_same_date_as_today, streak_connections, to_24_hour,
)

router = APIRouter()

def _selected_out(selected: date) -> SelectedDateOut:
    iso = selected.isoformat()
    return SelectedDateOut(
        date=selected,
        today=date.fromisoformat(current_date_string()),
        is_today=is_same_date_as_today(iso),
        is_future=is_date_in_future(iso),
    )

@router.get("/filters", response_model=FilterOptions)
async def get_filters(store: ReminderStore = Depends(get_store)):
    return store.filters

@router.put("/filters", response_model=FilterOptions)
async def set_filters(body: FilterOptions, store: ReminderStore = Depends(get_store)):
    # reemplazo completo: lo que no se envía queda sin filtro
    store.set_filters(body)
    return store.filters

@router.get("/selected-date", response_model=SelectedDateOut)
async def get_selected_date(store: ReminderStore = Depends(get_store)):
    return _selected_out(store.selected_date)

@router.put("/selected-date", response_model=SelectedDateOut)
async def set_selected_date(body: SelectedDate, store: ReminderStore = Depends(get_store)):
    store.set_selected_date(body.date)
    return _selected_out(store.selected_date)

@router.get("/week", response_model=List[CalendarDate])
async def week_strip(store: ReminderStore = Depends(get_store)):
    return streak_connections(get_week_dates(store.selected_date), store.reminders)

# ---------- Horas ----------

@router.get("/time", response_model=TimeDisplay)
async def describe_time(time: str = Query(..., pattern=TIME_PATTERN)):
    """Datos para pintar una hora: formato 12h, selector del formulario y franja."""
    hour, minute, ampm = from_24_hour(time)
    slot = classify_time_slot(time)
    return TimeDisplay(
        time=time,
        display=format_time(time),
        hour=hour,
        minute=minute,
        ampm=ampm,
        time_slot=slot,
        label=time_slot_label(slot),
        icon=time_slot_icon(slot),
    )

@router.get("/time/24h")
async def convert_to_24_hour(
    hour: int = Query(..., ge=1, le=12),
    minute: str = Query(..., pattern=r"^[0-5]\d$"),
    ampm: Literal["AM", "PM"] = "AM",
):
    return {"time": to_24_hour(hour, minute, ampm)}
