from pydantic import BaseModel, Field
from typing import Optional

class PetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    avatar: Optional[str] = Field(None, max_length=16)   # emoji o URL corta

class Pet(PetCreate):
    id: str
