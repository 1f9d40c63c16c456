# petminder/utils.py
from typing import Iterable, List, Optional, Tuple
from datetime import date, datetime, timedelta

from .schemas.reminder import CalendarDate, Reminder

# ==================== Semana / calendario ====================

def get_week_dates(day: date | datetime, today: Optional[date] = None) -> List[CalendarDate]:
    """
    Devuelve los 7 días de la semana de `day`, empezando en lunes.
    """
    if isinstance(day, datetime):
        day = day.date()
    today = today or date.today()
    start = day - timedelta(days=day.weekday())
    dates = []
    for i in range(7):
        current = start + timedelta(days=i)
        dates.append(CalendarDate(
            date=current,
            day=current.day,
            is_today=current == today,
            day_name=current.strftime("%a"),
        ))
    return dates

def has_completed_reminders(reminders: Iterable[Reminder], day: date) -> bool:
    """Algún recordatorio completado ese día (por completed_at o por el histórico)."""
    for r in reminders:
        if not r.is_completed:
            continue
        if r.completed_at and r.completed_at.date() == day:
            return True
        if r.completed_dates and day in r.completed_dates:
            return True
    return False

def streak_connections(week: List[CalendarDate], reminders: Iterable[Reminder]) -> List[CalendarDate]:
    """
    Marca los días con completados y si enlazan racha con el día siguiente.
    El último día de la semana nunca enlaza.
    """
    reminders = list(reminders)
    flags = [has_completed_reminders(reminders, d.date) for d in week]
    out = []
    for i, d in enumerate(week):
        connection = flags[i] and i < len(week) - 1 and flags[i + 1]
        out.append(d.model_copy(update={"has_completed": flags[i], "streak_connection": connection}))
    return out

# ==================== Horas ====================

def format_time(time: str) -> str:
    """'13:05' -> '1:05 PM'"""
    hours, minutes = time.split(":")[:2]
    hour = int(hours)
    ampm = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {ampm}"

def to_24_hour(hour: str | int, minute: str, ampm: str) -> str:
    """Hora del selector de 12h del formulario -> 'HH:MM'."""
    hour24 = int(hour)
    if ampm == "AM" and hour24 == 12:
        hour24 = 0
    if ampm == "PM" and hour24 != 12:
        hour24 += 12
    return f"{hour24:02d}:{minute}"

def from_24_hour(time24: Optional[str]) -> Tuple[str, str, str]:
    """'HH:MM' -> (hora 12h, minutos, AM/PM). Sin valor, el default del formulario."""
    if not time24:
        return "12", "06", "PM"
    hours, minutes = time24.split(":")[:2]
    hour24 = int(hours)
    hour12 = 12 if hour24 == 0 else hour24 - 12 if hour24 > 12 else hour24
    ampm = "PM" if hour24 >= 12 else "AM"
    return str(hour12), minutes, ampm

# ==================== Fechas ====================

def current_date_string() -> str:
    return date.today().isoformat()

def is_date_in_future(date_string: str, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now()
    return datetime.fromisoformat(date_string) > now

def is_same_date_as_today(date_string: str, today: Optional[date] = None) -> bool:
    today = today or date.today()
    return datetime.fromisoformat(date_string).date() == today
