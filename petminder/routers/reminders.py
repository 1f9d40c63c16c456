# petminder/routers/reminders.py
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from typing import Dict, List, Literal, Optional
from datetime import date
import logging

from ..agenda import (
    apply_filters, build_today_agenda, filter_by_status, group_by_frequency,
    sort_by_time_of_day,
)
from ..config import get_settings
from ..middleware.rate_limit import apply_rate_limit
from ..schemas.reminder import (
    Category, FilterOptions, Frequency, Reminder, ReminderFormData,
    ReminderUpdate, StreakOut, TimeSlot, TodayAgenda,
)
from ..state import get_store
from ..store import ReminderStore

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()

NULLABLE_FIELDS = {"notes", "completed_dates"}

def _get_or_404(store: ReminderStore, reminder_id: str) -> Reminder:
    reminder = store.get_reminder(reminder_id)
    if not reminder:
        raise HTTPException(404, "Recordatorio no encontrado")
    return reminder

# ---------- Listados ----------

@router.get("", response_model=List[Reminder])
async def list_reminders(
    pet_id: Optional[str] = None,
    category: Optional[Category] = None,
    time_slot: Optional[TimeSlot] = None,
    status: Literal["all", "pending", "completed"] = "all",
    store: ReminderStore = Depends(get_store),
):
    filters = FilterOptions(pet_id=pet_id, category=category, time_slot=time_slot)
    items = filter_by_status(apply_filters(store.reminders, filters), status)
    return sort_by_time_of_day(items)

@router.get("/today", response_model=TodayAgenda)
async def today_agenda(
    day: Optional[date] = Query(None, description="Por defecto, hoy"),
    store: ReminderStore = Depends(get_store),
):
    return build_today_agenda(store.reminders, store.filters, day or date.today())

@router.get("/by-frequency", response_model=Dict[Frequency, List[Reminder]])
async def reminders_by_frequency(
    status: Literal["all", "pending", "completed"] = "all",
    store: ReminderStore = Depends(get_store),
):
    items = filter_by_status(apply_filters(store.reminders, store.filters), status)
    return group_by_frequency(items)

@router.get("/{reminder_id}", response_model=Reminder)
async def get_reminder(reminder_id: str, store: ReminderStore = Depends(get_store)):
    return _get_or_404(store, reminder_id)

@router.get("/{reminder_id}/streak", response_model=StreakOut)
async def get_streak(reminder_id: str, store: ReminderStore = Depends(get_store)):
    _get_or_404(store, reminder_id)
    return StreakOut(id=reminder_id, streak=store.calculate_streak(reminder_id))

# ---------- Mutaciones ----------

@router.post("", response_model=Reminder, status_code=status.HTTP_201_CREATED)
async def create_reminder(
    request: Request,
    payload: ReminderFormData,
    store: ReminderStore = Depends(get_store),
):
    apply_rate_limit(request, settings.create_rate_limit)
    if not store.get_pet(payload.pet_id):
        # se permite igual: pet_name queda vacío
        logger.warning(f"Recordatorio para mascota desconocida: {payload.pet_id}")
    return store.add_reminder(payload)

@router.put("/{reminder_id}", response_model=Reminder)
async def update_reminder(
    reminder_id: str,
    payload: ReminderUpdate,
    store: ReminderStore = Depends(get_store),
):
    _get_or_404(store, reminder_id)
    changes = payload.model_dump(exclude_unset=True)
    # un null explícito solo borra los campos opcionales; en el resto se ignora
    changes = {k: v for k, v in changes.items() if v is not None or k in NULLABLE_FIELDS}
    store.update_reminder(reminder_id, changes)
    return store.get_reminder(reminder_id)

@router.patch("/{reminder_id}/complete", response_model=Reminder)
async def toggle_complete(reminder_id: str, store: ReminderStore = Depends(get_store)):
    _get_or_404(store, reminder_id)
    store.toggle_reminder_complete(reminder_id)
    return store.get_reminder(reminder_id)

@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reminder(reminder_id: str, store: ReminderStore = Depends(get_store)):
    _get_or_404(store, reminder_id)
    store.delete_reminder(reminder_id)
    return None
