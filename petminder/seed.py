# Datos de ejemplo para el arranque en frío (sin mascotas ni recordatorios)
from datetime import date, datetime, timedelta
from typing import List, Optional

from .schemas.pet import Pet
from .schemas.reminder import Category, Frequency, Reminder

SAMPLE_PETS = [
    {"id": "1", "name": "Browny", "avatar": "🐕"},
    {"id": "2", "name": "Whiskers", "avatar": "🐱"},
    {"id": "3", "name": "Buddy", "avatar": "🐶"},
]

# (id, título, pet_id, categoría, hora, frecuencia, completado, racha, días completados)
# Los días completados se cuentan hacia atrás desde HISTORY_END.
HISTORY_END = date(2025, 1, 14)
SAMPLE_REMINDERS = [
    ("1", "Morning Walk", "1", Category.lifestyle, "07:00", Frequency.daily, True, 15, 6),
    ("2", "Evening Walk", "1", Category.lifestyle, "18:00", Frequency.daily, False, 3, 0),
    ("3", "Breakfast", "1", Category.general, "08:00", Frequency.daily, True, 10, 10),
    ("4", "Lunch", "1", Category.general, "13:00", Frequency.daily, False, 4, 0),
    ("5", "Medication", "2", Category.health, "22:00", Frequency.daily, True, 8, 8),
    ("6", "Afternoon Playtime", "3", Category.lifestyle, "15:00", Frequency.daily, False, 2, 0),
    ("7", "Grooming Session", "2", Category.general, "09:00", Frequency.weekly, False, 1, 0),
    ("8", "Vitamin Supplements", "3", Category.health, "10:00", Frequency.daily, True, 12, 12),
    ("9", "Training Session", "1", Category.lifestyle, "11:00", Frequency.daily, False, 5, 0),
    ("10", "Snack Time", "2", Category.general, "14:00", Frequency.daily, False, 7, 0),
    ("11", "Outdoor Exercise", "3", Category.lifestyle, "16:00", Frequency.daily, True, 9, 9),
    ("12", "Health Check", "1", Category.health, "16:30", Frequency.weekly, False, 3, 0),
    ("13", "Dinner Time", "2", Category.general, "19:00", Frequency.daily, False, 6, 0),
    ("14", "Interactive Play", "3", Category.lifestyle, "19:30", Frequency.daily, True, 11, 11),
    ("15", "Relaxation Time", "1", Category.lifestyle, "20:00", Frequency.daily, False, 4, 0),
    ("16", "Brushing Teeth", "2", Category.health, "20:30", Frequency.daily, False, 8, 0),
    ("17", "Bedtime Routine", "3", Category.general, "21:00", Frequency.daily, True, 14, 14),
    ("18", "Night Medication", "1", Category.health, "23:00", Frequency.daily, False, 2, 0),
    ("19", "Security Check", "3", Category.general, "23:30", Frequency.daily, False, 1, 0),
    ("20", "Final Comfort Check", "2", Category.general, "23:45", Frequency.daily, True, 6, 6),
]


def sample_pets() -> List[Pet]:
    return [Pet(**p) for p in SAMPLE_PETS]


def _history(days: int) -> Optional[List[date]]:
    if not days:
        return None
    return [HISTORY_END - timedelta(days=n) for n in range(days - 1, -1, -1)]


def sample_reminders(now: Optional[datetime] = None) -> List[Reminder]:
    now = now or datetime.now()
    names = {p["id"]: p["name"] for p in SAMPLE_PETS}
    out = []
    for rid, title, pet_id, category, at, frequency, done, streak, days in SAMPLE_REMINDERS:
        out.append(Reminder(
            id=rid,
            title=title,
            pet_id=pet_id,
            pet_name=names[pet_id],
            category=category,
            start_date=now.date(),
            time=at,
            frequency=frequency,
            is_completed=done,
            streak=streak,
            completed_dates=_history(days),
            created_at=now,
            updated_at=now,
        ))
    return out
