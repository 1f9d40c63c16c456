from .config import get_settings
from .storage import storage_from_settings
from .store import ReminderStore

_settings = get_settings()
_store: ReminderStore | None = None

def get_store() -> ReminderStore:
    global _store
    if _store is None:
        _store = ReminderStore(storage_from_settings())
        _store.load()
        if _settings.seed_on_startup:
            _store.initialize_data()
    return _store
