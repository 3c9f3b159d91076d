# ================================
# MIGRATION TESTS (test_migrations.py)
# ================================

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker

from models import MemoryId
from schemas import Property, U64_MAX
from services.stable_storage import IdAllocator, StableBTreeMap

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def make_property(id_: int) -> Property:
    return Property(
        id=id_,
        address=f"{id_} Canal St",
        owner="Hana",
        valuation=420000.0,
        status="available",
        created_at=100,
    )


@pytest.fixture
def migrated_url(tmp_path, monkeypatch):
    """SQLite file upgraded to head through the Alembic scripts."""
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.delenv("DB_SERVER", raising=False)
    monkeypatch.setenv("DATABASE_URL", url)

    # No ini file, so env.py leaves logging alone
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(cfg, "head")
    yield url, cfg


class TestMigrations:
    """Schema created by Alembic instead of create_all."""

    def test_upgrade_creates_storage_tables(self, migrated_url):
        url, _ = migrated_url
        engine = create_engine(url)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"stable_entries", "stable_cells"} <= tables

    def test_storage_works_on_migrated_schema(self, migrated_url):
        url, _ = migrated_url
        engine = create_engine(url)
        Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        try:
            with Session() as db:
                table = StableBTreeMap(db, MemoryId.PROPERTIES, Property)
                counter = IdAllocator(db)
                assert counter.next_id() == 0
                assert counter.next_id() == 1
                for key in (U64_MAX, 7, 0, 2**63):
                    table.insert(key, make_property(key))
                db.commit()

            with Session() as db:
                table = StableBTreeMap(db, MemoryId.PROPERTIES, Property)
                assert [key for key, _ in table.iter()] == [0, 7, 2**63, U64_MAX]
                assert table.get(U64_MAX).address == f"{U64_MAX} Canal St"
                assert IdAllocator(db).peek() == 2
        finally:
            engine.dispose()

    def test_downgrade_drops_storage_tables(self, migrated_url):
        url, cfg = migrated_url
        command.downgrade(cfg, "base")

        engine = create_engine(url)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert "stable_entries" not in tables
        assert "stable_cells" not in tables
