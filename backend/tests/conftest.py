import pytest
from httpx import AsyncClient, ASGITransport

from app.config import Config
from app.main import app
from app.db.database import db
from app.models import Role
from app.schemas.product import ProductCreate
from app.schemas.user import RegisterRequest
from app.services import product_service, user_service


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Cheap bcrypt rounds keep the suite fast."""
    monkeypatch.setattr(Config, "BCRYPT_ROUNDS", 4)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """Point image storage at a throwaway directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    monkeypatch.setattr(Config, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite database file per test."""
    await db.connect(f"sqlite:///{tmp_path / 'storefront.db'}")
    await db.create_tables()
    yield db
    await db.disconnect()


@pytest.fixture
async def session(database):
    async with await database.session() as session:
        yield session


@pytest.fixture
async def client(database):
    """Async test client backed by the temporary database."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
async def admin(session):
    return await user_service.register(
        session,
        RegisterRequest(name="Admin", email="admin@example.com", password="secret123"),
        role=Role.ADMIN
    )


@pytest.fixture
async def customer(session):
    return await user_service.register(
        session,
        RegisterRequest(name="Customer", email="customer@example.com", password="secret123")
    )


@pytest.fixture
def admin_headers(admin):
    return {"user-id": str(admin.id)}


@pytest.fixture
def customer_headers(customer):
    return {"user-id": str(customer.id)}


@pytest.fixture
def make_product(session):
    """Factory creating products through the mutation service."""
    async def _make(name: str, **fields):
        fields.setdefault("price", 50.0)
        return await product_service.create_product(session, ProductCreate(name=name, **fields))
    return _make
