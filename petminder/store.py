"""
Store de recordatorios: único dueño de las listas de recordatorios y mascotas.

Toda mutación pasa por sus métodos para que updated_at y la racha se apliquen
siempre igual. Tras cada cambio en recordatorios o mascotas se guarda el
snapshot completo en el backend de persistencia (write-through). Los filtros y
la fecha seleccionada son estado de vista y no se persisten.

Los ids desconocidos no son error: update/delete/toggle simplemente no hacen nada.
"""
import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from .schemas.pet import Pet, PetCreate
from .schemas.reminder import (
    FilterOptions, Frequency, Reminder, ReminderFormData, StoreSnapshot,
)
from .seed import sample_pets, sample_reminders
from .storage import MemoryStorage

logger = logging.getLogger(__name__)

# Campos que un update no puede pisar
_PROTECTED = {"id", "created_at", "updated_at"}


class ReminderStore:
    def __init__(
        self,
        storage=None,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self._now = clock
        self._new_id = id_factory
        self._reminders: List[Reminder] = []
        self._pets: List[Pet] = []
        self._filters = FilterOptions()
        self._selected_date: date = clock().date()

    # ---------- Lectura ----------

    @property
    def reminders(self) -> List[Reminder]:
        return [r.model_copy(deep=True) for r in self._reminders]

    @property
    def pets(self) -> List[Pet]:
        return [p.model_copy() for p in self._pets]

    @property
    def filters(self) -> FilterOptions:
        return self._filters.model_copy()

    @property
    def selected_date(self) -> date:
        return self._selected_date

    def get_reminder(self, reminder_id: str) -> Optional[Reminder]:
        idx = self._index(reminder_id)
        return None if idx is None else self._reminders[idx].model_copy(deep=True)

    def get_pet(self, pet_id: str) -> Optional[Pet]:
        for p in self._pets:
            if p.id == pet_id:
                return p.model_copy()
        return None

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(reminders=self.reminders, pets=self.pets)

    # ---------- Arranque ----------

    def load(self) -> None:
        """Carga el último snapshot guardado, si lo hay."""
        snap = self.storage.load()
        if snap is None:
            return
        self._reminders = list(snap.reminders)
        self._pets = list(snap.pets)
        logger.info(f"Cargados {len(self._reminders)} recordatorios y {len(self._pets)} mascotas")

    def initialize_data(self) -> None:
        """Datos de ejemplo para arranque en frío; cada lista se comprueba por separado."""
        changed = False
        if not self._pets:
            self._pets = sample_pets()
            changed = True
        if not self._reminders:
            self._reminders = sample_reminders(self._now())
            changed = True
        if changed:
            logger.info("Datos de ejemplo cargados")
            self._save()

    def clear(self) -> None:
        self._reminders = []
        self._pets = []
        self._filters = FilterOptions()
        self._save()

    # ---------- Mascotas ----------

    def add_pet(self, data: PetCreate) -> Pet:
        pet = Pet(id=self._new_id(), **data.model_dump())
        self._pets.append(pet)
        self._save()
        return pet.model_copy()

    # ---------- Recordatorios ----------

    def add_reminder(self, data: ReminderFormData) -> Reminder:
        pet = self.get_pet(data.pet_id)
        now = self._now()
        reminder = Reminder(
            id=self._new_id(),
            **data.model_dump(),
            pet_name=pet.name if pet else "",
            is_completed=False,
            streak=0,
            created_at=now,
            updated_at=now,
        )
        self._reminders.append(reminder)
        logger.debug(f"Recordatorio creado: {reminder.id} ({reminder.title})")
        self._save()
        return reminder.model_copy(deep=True)

    def update_reminder(self, reminder_id: str, data: Dict[str, Any]) -> None:
        idx = self._index(reminder_id)
        if idx is None:
            return
        changes = {k: v for k, v in data.items() if k not in _PROTECTED}
        current = self._reminders[idx].model_dump()
        current.update(changes)
        current["updated_at"] = self._now()
        self._reminders[idx] = Reminder.model_validate(current)
        self._save()

    def delete_reminder(self, reminder_id: str) -> None:
        idx = self._index(reminder_id)
        if idx is None:
            return
        del self._reminders[idx]
        logger.debug(f"Recordatorio borrado: {reminder_id}")
        self._save()

    def toggle_reminder_complete(self, reminder_id: str) -> None:
        idx = self._index(reminder_id)
        if idx is None:
            return
        reminder = self._reminders[idx]
        now = self._now()
        completed = not reminder.is_completed
        if completed:
            streak = reminder.streak + 1
        else:
            streak = max(0, reminder.streak - 1)
        # completed_dates no se toca aquí: la racha es un contador simple
        self._reminders[idx] = reminder.model_copy(update={
            "is_completed": completed,
            "completed_at": now if completed else None,
            "streak": streak,
            "updated_at": now,
        })
        self._save()

    def calculate_streak(self, reminder_id: str) -> int:
        idx = self._index(reminder_id)
        if idx is None:
            return 0
        reminder = self._reminders[idx]
        if reminder.frequency == Frequency.once:
            return 0
        return reminder.streak

    # ---------- Estado de vista ----------

    def set_filters(self, filters: FilterOptions) -> None:
        self._filters = filters.model_copy()

    def set_selected_date(self, selected: date) -> None:
        self._selected_date = selected

    # ---------- Internos ----------

    def _index(self, reminder_id: str) -> Optional[int]:
        for i, r in enumerate(self._reminders):
            if r.id == reminder_id:
                return i
        return None

    def _save(self) -> None:
        self.storage.save(StoreSnapshot(reminders=self._reminders, pets=self._pets))
