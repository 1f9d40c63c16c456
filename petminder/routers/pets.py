from fastapi import APIRouter, Depends, HTTPException, status
from ..state import get_store
from ..store import ReminderStore
from ..schemas.pet import Pet, PetCreate

router = APIRouter()

@router.get("", response_model=list[Pet])
async def list_pets(store: ReminderStore = Depends(get_store)):
    return store.pets

@router.get("/{pet_id}", response_model=Pet)
async def get_pet(pet_id: str, store: ReminderStore = Depends(get_store)):
    pet = store.get_pet(pet_id)
    if not pet:
        raise HTTPException(status_code=404, detail="Mascota no encontrada")
    return pet

@router.post("", response_model=Pet, status_code=status.HTTP_201_CREATED)
async def create_pet(payload: PetCreate, store: ReminderStore = Depends(get_store)):
    return store.add_pet(payload)
