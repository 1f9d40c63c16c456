"""
Clasificación por franja horaria y agenda del día.

Funciones puras sobre listas de Reminder: no tocan el store ni hacen I/O.
"""
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from .schemas.reminder import (
    FilterOptions, Frequency, Reminder, TimeSlot, TodayAgenda,
)

# Intervalos semiabiertos sobre la hora; lo que no cae en ninguno es noche
SLOT_BOUNDS = [
    (TimeSlot.morning, 5, 12),
    (TimeSlot.afternoon, 12, 17),
    (TimeSlot.evening, 17, 21),
]

SLOT_LABELS = {
    TimeSlot.morning: "Morning",
    TimeSlot.afternoon: "Afternoon",
    TimeSlot.evening: "Evening",
    TimeSlot.night: "Night",
}

SLOT_ICONS = {
    TimeSlot.morning: "🌅",
    TimeSlot.afternoon: "☀️",
    TimeSlot.evening: "🌆",
    TimeSlot.night: "🌙",
}


def classify_time_slot(time: str) -> TimeSlot:
    """Franja de un "HH:MM". Solo cuenta la hora; los minutos se ignoran.

    Una hora no numérica lanza ValueError: validar antes de llamar.
    """
    hour = int(time.split(":")[0])
    for slot, start, end in SLOT_BOUNDS:
        if start <= hour < end:
            return slot
    return TimeSlot.night


def minutes_since_midnight(time: str) -> int:
    hours, minutes = time.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def is_active_today(reminder: Reminder, today: date | datetime) -> bool:
    """Once: solo su start_date. El resto, activos todos los días.

    Daily/Weekly/Monthly no se filtran por fecha de inicio, día de la semana
    ni día del mes.
    """
    if isinstance(today, datetime):
        today = today.date()
    if reminder.frequency == Frequency.once:
        return reminder.start_date == today
    return True


def sort_by_time_of_day(reminders: Iterable[Reminder]) -> List[Reminder]:
    # sorted() es estable: a igual hora se respeta el orden original
    return sorted(reminders, key=lambda r: minutes_since_midnight(r.time))


def group_by_time_slot(reminders: Iterable[Reminder]) -> Dict[TimeSlot, List[Reminder]]:
    """Agrupa una secuencia ya filtrada y ordenada. Las franjas vacías no aparecen."""
    grouped: Dict[TimeSlot, List[Reminder]] = {}
    for reminder in reminders:
        grouped.setdefault(classify_time_slot(reminder.time), []).append(reminder)
    return grouped


def group_by_frequency(reminders: Iterable[Reminder]) -> Dict[Frequency, List[Reminder]]:
    grouped: Dict[Frequency, List[Reminder]] = {}
    for reminder in reminders:
        grouped.setdefault(reminder.frequency, []).append(reminder)
    return grouped


def apply_filters(reminders: Iterable[Reminder], filters: Optional[FilterOptions]) -> List[Reminder]:
    if filters is None:
        return list(reminders)
    out = []
    for r in reminders:
        if filters.pet_id and r.pet_id != filters.pet_id:
            continue
        if filters.category and r.category != filters.category:
            continue
        if filters.time_slot and classify_time_slot(r.time) != filters.time_slot:
            continue
        out.append(r)
    return out


def filter_by_status(reminders: Iterable[Reminder], status: str = "all") -> List[Reminder]:
    if status == "pending":
        return [r for r in reminders if not r.is_completed]
    if status == "completed":
        return [r for r in reminders if r.is_completed]
    return list(reminders)


def build_today_agenda(
    reminders: Iterable[Reminder],
    filters: Optional[FilterOptions],
    today: date | datetime,
) -> TodayAgenda:
    if isinstance(today, datetime):
        today = today.date()
    active = apply_filters((r for r in reminders if is_active_today(r, today)), filters)
    pending = sort_by_time_of_day(filter_by_status(active, "pending"))
    return TodayAgenda(
        date=today,
        pending_by_slot=group_by_time_slot(pending),
        pending_count=len(pending),
        completed=filter_by_status(active, "completed"),
    )


def time_slot_label(slot: TimeSlot) -> str:
    return SLOT_LABELS.get(slot, "Other")


def time_slot_icon(slot: TimeSlot) -> str:
    return SLOT_ICONS.get(slot, "⏰")
