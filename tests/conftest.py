"""
Configuración de pytest para tests
"""
import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from petminder.schemas.pet import Pet
from petminder.schemas.reminder import StoreSnapshot
from petminder.storage import MemoryStorage
from petminder.store import ReminderStore


class FakeClock:
    """Reloj controlable: cada llamada avanza un segundo."""
    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


# Deshabilitar rate limiting en la app antes de usarla
@pytest.fixture(scope="session", autouse=True)
def disable_rate_limiting():
    """Deshabilita rate limiting para todos los tests"""
    from petminder.main import app
    app.state.limiter = None

@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 1, 8, 0, 0))

@pytest.fixture
def storage():
    return MemoryStorage(StoreSnapshot(pets=[Pet(id="1", name="Browny", avatar="🐕")]))

@pytest.fixture
def store(storage, clock):
    """Store con una sola mascota y sin recordatorios"""
    s = ReminderStore(storage, clock=clock)
    s.load()
    return s

@pytest.fixture
def seeded_store(clock):
    s = ReminderStore(MemoryStorage(), clock=clock)
    s.initialize_data()
    return s

@pytest.fixture
def client(store):
    """Cliente de test de FastAPI con el store del test inyectado"""
    from petminder.main import app
    from petminder.state import get_store
    app.state.limiter = None
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def reminder_data():
    """Datos de formulario de prueba"""
    return {
        "title": "Walk",
        "pet_id": "1",
        "category": "Lifestyle",
        "start_date": "2025-01-01",
        "time": "07:00",
        "frequency": "Daily",
    }
