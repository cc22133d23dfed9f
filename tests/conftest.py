# tests/conftest.py
import os
import sys
import logging
from types import SimpleNamespace

# Settings are read at import time; point them at SQLite before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CACHE_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.caller import UserRole
from app.core.database import get_db
from app.main import app
from app.models import Base, Tenant, User, ClassModel, Student

from .factories import make_caller


@pytest.fixture(scope="session", autouse=True)
def _tests_log_to_stdout():
    root = logging.getLogger()
    if not any(getattr(h, "stream", None) is sys.stdout for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(os.getenv("TEST_LOG_LEVEL", "INFO").upper())


# ==============================================================
# Database
# ==============================================================

@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def schools(db):
    """Two schools, each with a class, students and staff"""
    school_a = Tenant(school_code="SMA1", school_name="SMA Negeri 1")
    school_b = Tenant(school_code="SMA2", school_name="SMA Negeri 2")
    db.add_all([school_a, school_b])
    await db.flush()

    class_a = ClassModel(tenant_id=school_a.id, class_name="XI IPA 1")
    class_a2 = ClassModel(tenant_id=school_a.id, class_name="XI IPS 2")
    class_b = ClassModel(tenant_id=school_b.id, class_name="X 1")
    db.add_all([class_a, class_a2, class_b])
    await db.flush()

    student_a = Student(tenant=school_a, class_=class_a, name="Budi Santoso", nis="1001", nisn="0051001")
    student_a2 = Student(tenant=school_a, class_=class_a2, name="Citra Lestari", nis="1002", nisn="0051002")
    student_a3 = Student(tenant=school_a, class_=class_a, name="Dewi Anggraini", nis="1003")
    student_b = Student(tenant=school_b, class_=class_b, name="Eko Prasetyo", nis="2001")

    counselor_a = User(tenant_id=school_a.id, username="bk.a", full_name="Ibu Sari", role="counselor")
    admin_a = User(tenant_id=school_a.id, username="admin.a", full_name="Pak Joko", role="school_admin")
    teacher_a = User(tenant_id=school_a.id, username="guru.a", full_name="Pak Andi", role="teacher")
    teacher_b = User(tenant_id=school_b.id, username="guru.b", full_name="Bu Rina", role="teacher")
    counselor_b = User(tenant_id=school_b.id, username="bk.b", full_name="Ibu Wati", role="counselor")
    platform_admin = User(tenant_id=None, username="root", role="super_admin")

    db.add_all([
        student_a, student_a2, student_a3, student_b,
        counselor_a, admin_a, teacher_a, teacher_b, counselor_b, platform_admin,
    ])
    await db.commit()

    return SimpleNamespace(
        school_a=school_a, school_b=school_b,
        class_a=class_a, class_a2=class_a2, class_b=class_b,
        student_a=student_a, student_a2=student_a2, student_a3=student_a3, student_b=student_b,
        counselor_a=counselor_a, admin_a=admin_a, teacher_a=teacher_a,
        teacher_b=teacher_b, counselor_b=counselor_b, platform_admin=platform_admin,
    )


# ==============================================================
# HTTP client
# ==============================================================

@pytest.fixture
async def client(session_factory, schools):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def counselor(schools):
    return make_caller(schools.counselor_a, schools.school_a)


@pytest.fixture
def homeroom(schools):
    return make_caller(schools.teacher_a, schools.school_a, UserRole.HOMEROOM_TEACHER)


@pytest.fixture
def admin(schools):
    return make_caller(schools.admin_a, schools.school_a)
