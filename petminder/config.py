from pydantic import BaseModel
import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz

def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Petminder")
    env: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    # vacío -> almacenamiento en memoria (se pierde al reiniciar)
    storage_path: str = os.getenv("STORAGE_PATH", "")
    seed_on_startup: bool = _env_bool("SEED_ON_STARTUP", "true")
    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:3000")
    create_rate_limit: str = os.getenv("CREATE_RATE_LIMIT", "30/minute")

    @property
    def storage_backend(self) -> str:
        return "json" if self.storage_path else "memory"


_settings: Settings | None = None
def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
        if _settings.storage_path:
            Path(_settings.storage_path).parent.mkdir(parents=True, exist_ok=True)
    return _settings
