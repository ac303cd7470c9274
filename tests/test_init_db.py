from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from app.auth import AuthService
from app.config import Settings
from app.cruds.member import member_crud
from app.database import create_db_engine
from app.init_db import seed_admin
from app.main import create_app
from app.models import MemberRole


def _settings(password: str) -> Settings:
    settings = Settings()
    settings.ADMIN_PASSWORD = password
    return settings


def test_seed_admin_is_idempotent(db, crud):
    settings = _settings("Test1234!")

    first = seed_admin(db, settings)
    second = seed_admin(db, settings)

    assert first.member_no == second.member_no
    assert first.role == MemberRole.ADMIN.value
    assert AuthService.verify_password("Test1234!", first.password_hash)
    assert len(crud.search_members(db)) == 1


def test_seed_skipped_without_password(db, crud):
    assert seed_admin(db, _settings("")) is None
    assert crud.search_members(db) == []


def test_database_prepared_on_startup_not_on_create():
    """앱 생성만으로는 DB 에 접근하지 않고, 시작 시점에 테이블과 관리자 계정을 만든다."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    app = create_app(_settings("Test1234!"), engine=engine)

    assert inspect(engine).get_table_names() == []

    with TestClient(app):
        assert "members" in inspect(engine).get_table_names()
        db = app.state.session_factory()
        try:
            admin = member_crud.get_member_by_login_id(db, "admin1")
            assert admin.role == MemberRole.ADMIN.value
        finally:
            db.close()
