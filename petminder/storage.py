"""
Persistencia del estado de la app: recordatorios y mascotas.

Dos backends con la misma interfaz (load/save de un StoreSnapshot):
- MemoryStorage: vive en el proceso, se pierde al reiniciar.
- JsonFileStorage: documento JSON local, equivalente al localStorage del navegador.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import get_settings
from .schemas.reminder import StoreSnapshot

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Guarda una copia del último snapshot en memoria."""
    name = "memory"

    def __init__(self, snapshot: Optional[StoreSnapshot] = None):
        self._data: Optional[str] = snapshot.model_dump_json() if snapshot else None

    def load(self) -> Optional[StoreSnapshot]:
        if self._data is None:
            return None
        return StoreSnapshot.model_validate_json(self._data)

    def save(self, snapshot: StoreSnapshot) -> None:
        # serializado para que el estado guardado no comparta objetos con el store
        self._data = snapshot.model_dump_json()


class JsonFileStorage:
    """Documento JSON {"reminders": [...], "pets": [...]} en disco."""
    name = "json"

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[StoreSnapshot]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return StoreSnapshot.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            # Datos ilegibles: se arranca con estado vacío, igual que el navegador
            logger.error(f"No se pudo leer {self.path}: {e}", exc_info=True)
            self._keep_corrupt()
            return None

    def _keep_corrupt(self) -> None:
        # se aparta el fichero para que el siguiente save no lo pise
        backup = self.path.with_suffix(self.path.suffix + ".corrupt")
        try:
            self.path.replace(backup)
            logger.warning(f"Copia del fichero ilegible en {backup}")
        except OSError as e:
            logger.error(f"No se pudo apartar {self.path}: {e}")

    def save(self, snapshot: StoreSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(snapshot.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        tmp.replace(self.path)


def storage_from_settings():
    settings = get_settings()
    if settings.storage_path:
        return JsonFileStorage(settings.storage_path)
    return MemoryStorage()
