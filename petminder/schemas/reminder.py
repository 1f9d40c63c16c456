from pydantic import BaseModel, Field
from enum import Enum
from datetime import date, datetime
from typing import Optional, List

from .pet import Pet

# HH:MM en 24 horas
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

class Category(str, Enum):
    general   = "General"
    lifestyle = "Lifestyle"
    health    = "Health"

class Frequency(str, Enum):
    once    = "Once"
    daily   = "Daily"
    weekly  = "Weekly"
    monthly = "Monthly"

class TimeSlot(str, Enum):
    morning   = "morning"
    afternoon = "afternoon"
    evening   = "evening"
    night     = "night"

class ReminderFormData(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    pet_id: str = Field(..., min_length=1)
    category: Category
    notes: Optional[str] = None
    start_date: date
    time: str = Field(..., pattern=TIME_PATTERN)
    frequency: Frequency

class Reminder(ReminderFormData):
    id: str
    pet_name: str = ""
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    completed_dates: Optional[List[date]] = None
    streak: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime

class ReminderUpdate(BaseModel):
    """Campos opcionales; solo se fusionan los que se envían."""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    pet_id: Optional[str] = Field(None, min_length=1)
    pet_name: Optional[str] = None
    category: Optional[Category] = None
    notes: Optional[str] = None
    start_date: Optional[date] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    frequency: Optional[Frequency] = None
    is_completed: Optional[bool] = None
    completed_dates: Optional[List[date]] = None
    streak: Optional[int] = Field(None, ge=0)

class FilterOptions(BaseModel):
    pet_id: Optional[str] = None
    category: Optional[Category] = None
    time_slot: Optional[TimeSlot] = None

class SelectedDate(BaseModel):
    date: date

class CalendarDate(BaseModel):
    date: date
    day: int
    is_today: bool
    day_name: str
    has_completed: bool = False
    streak_connection: bool = False

class StoreSnapshot(BaseModel):
    reminders: List[Reminder] = []
    pets: List[Pet] = []

class TodayAgenda(BaseModel):
    date: date
    pending_by_slot: dict[TimeSlot, List[Reminder]] = {}
    pending_count: int = 0
    completed: List[Reminder] = []

class StreakOut(BaseModel):
    id: str
    streak: int

class SelectedDateOut(SelectedDate):
    today: date
    is_today: bool
    is_future: bool

class TimeDisplay(BaseModel):
    time: str
    display: str          # "1:05 PM"
    hour: str             # 12h
    minute: str
    ampm: str
    time_slot: TimeSlot
    label: str
    icon: str
