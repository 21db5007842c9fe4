"""API test fixtures — temp-file SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh database file with all tables created
    - The module-level db_manager is swapped in and restored afterwards, so
      get_db and the readiness probe both see the test database
    - Seed helpers write through their own session, never the request's

Design Decisions:
    - Temp file over :memory:: each AsyncSession may hold its own connection
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

import sh_pizza.infrastructure.database as db_module
from sh_pizza.infrastructure.database import DatabaseSessionManager
from sh_pizza.infrastructure.security import hash_password
from sh_pizza.main import app
from sh_pizza.models import Branch, Notification, Offer, Order, Pizza, Topping, User
from sh_pizza.services.auth import issue_token

PASSWORD = "password123"


@pytest.fixture
async def manager(tmp_path):
    original = db_module.db_manager
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await mgr.create_all()
    db_module.db_manager = mgr
    yield mgr
    db_module.db_manager = original
    await mgr.dispose()


@pytest.fixture
async def test_db(manager):
    async with manager.session() as session:
        yield session


@pytest.fixture
async def client(manager):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


# ─── Seed helpers ───────────────────────────────────────────────

@pytest.fixture
def seed(manager):
    """Factory namespace for inserting rows directly."""

    class _Seed:
        async def add(self, entity):
            async with manager.session() as session:
                session.add(entity)
                await session.commit()
                await session.refresh(entity)
            return entity

        async def user(self, email, role="CUSTOMER", branch_id=None):
            return await self.add(User(
                email=email,
                password_hash=hash_password(PASSWORD),
                role=role,
                branch_id=branch_id,
            ))

        async def branch(self, name="Downtown", **kw):
            return await self.add(Branch(
                name=name,
                address=kw.get("address", "1 Main St"),
                phone=kw.get("phone", "555-0100"),
                delivery_zones=kw.get("delivery_zones", []),
                is_active=kw.get("is_active", True),
            ))

        async def topping(self, name="Mushroom", price="1.50", category="vegetable"):
            return await self.add(Topping(
                name=name, price=Decimal(price), category=category,
            ))

        async def pizza(self, branch_id, name="Margherita", base_price="9.99"):
            return await self.add(Pizza(
                name=name, base_price=Decimal(base_price), branch_id=branch_id,
            ))

        async def order(self, customer_id, branch_id, total="20.00",
                        status="pending", created_at=None):
            return await self.add(Order(
                customer_id=customer_id,
                branch_id=branch_id,
                total_amount=Decimal(total),
                status=status,
                created_at=created_at or datetime.now(timezone.utc),
            ))

        async def offer(self, name, valid_from, valid_until,
                        discount_type="percentage", value="10", is_active=True):
            return await self.add(Offer(
                name=name,
                discount_type=discount_type,
                discount_value=Decimal(value),
                valid_from=valid_from,
                valid_until=valid_until,
                is_active=is_active,
            ))

        async def notification(self, user_id, message="Order ready", is_read=False):
            return await self.add(Notification(
                user_id=user_id, message=message, is_read=is_read,
            ))

    return _Seed()


def bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
async def admin(seed):
    return await seed.user("admin@shpizza.test", role="ADMIN")


@pytest.fixture
async def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
async def customer(seed):
    return await seed.user("customer@shpizza.test", role="CUSTOMER")


@pytest.fixture
async def customer_headers(customer):
    return bearer(customer)


@pytest.fixture
def headers_for():
    """Build Authorization headers for any seeded user."""
    return bearer


@pytest.fixture
def password():
    """Plain password every seeded user signs in with."""
    return PASSWORD
