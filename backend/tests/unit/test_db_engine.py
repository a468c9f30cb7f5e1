from sqlalchemy.pool import StaticPool

from gymdesk.core.db import build_engine


def test_in_memory_sqlite_shares_one_connection():
    engine = build_engine("sqlite://")
    assert isinstance(engine.pool, StaticPool)


def test_file_sqlite_uses_regular_pool(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'gymdesk.db'}")
    assert not isinstance(engine.pool, StaticPool)
