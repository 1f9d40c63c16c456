# petminder/routers/dev.py
# Endpoints de desarrollo para recargar los datos de prueba
from fastapi import APIRouter, Depends
from ..state import get_store
from ..store import ReminderStore

router = APIRouter()

@router.post("/seed-data")
async def seed_data(store: ReminderStore = Depends(get_store)):
    """
    Carga mascotas y recordatorios de ejemplo si las listas están vacías.
    Solo para desarrollo.
    """
    store.initialize_data()
    return {"pets": len(store.pets), "reminders": len(store.reminders)}

@router.post("/reset")
async def reset_data(store: ReminderStore = Depends(get_store)):
    """Borra todo y vuelve a sembrar los datos de ejemplo."""
    store.clear()
    store.initialize_data()
    return {"pets": len(store.pets), "reminders": len(store.reminders)}
