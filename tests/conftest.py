import os

# app.config 는 import 시점에 환경변수를 읽으므로 먼저 설정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.cruds.member import MemberCRUD
from app.database import create_db_engine, create_session_factory, init_models
from app.schemas.member import AvailabilityCheck, SignupForm
from app.services.member_service import MemberService


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_models(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def crud():
    return MemberCRUD()


@pytest.fixture
def service(crud):
    return MemberService(crud=crud)


@pytest.fixture
def client(engine):
    from app.main import create_app

    with TestClient(create_app(engine=engine)) as c:
        yield c


def make_signup_form(**overrides) -> SignupForm:
    """중복확인까지 마친 정상 회원가입 폼"""
    data = {
        "login_id": "hong01",
        "nickname": "홍길동",
        "email": "hong@example.com",
        "phone": "010-1234-5678",
        "password": "pass1234",
        "password_confirm": "pass1234",
        "job": "",
    }
    data.update(overrides)
    data.setdefault("login_id_check", AvailabilityCheck(value=data["login_id"].strip(), ok=True))
    data.setdefault("nickname_check", AvailabilityCheck(value=data["nickname"].strip(), ok=True))
    return SignupForm(**data)


@pytest.fixture
def signup_form():
    return make_signup_form


@pytest.fixture
def member(db, service, crud):
    """가입 완료된 회원 1명"""
    result = service.signup(db, make_signup_form())
    assert result.ok
    return crud.get_member_by_login_id(db, "hong01")
