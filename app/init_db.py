"""
데이터베이스 초기화 및 관리자 계정 생성
서버 시작 시 자동으로 실행되며, 직접 실행할 수도 있습니다.

    python -m app.init_db
"""
import logging
from typing import Optional
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from app.auth import AuthService
from app.config import Settings
from app.cruds.member import member_crud
from app.database import init_models
from app.models import Member, MemberRole

logger = logging.getLogger(__name__)


def init_database(engine: Engine) -> None:
    """테이블 생성 (없는 경우에만)"""
    existing_tables = inspect(engine).get_table_names()
    if existing_tables:
        logger.info(f"Existing tables: {', '.join(existing_tables)}")
    else:
        logger.info("No tables found, creating schema")

    init_models(engine)
    logger.info("Database schema ready")


def seed_admin(db: Session, settings: Settings, hasher=AuthService) -> Optional[Member]:
    """관리자 계정 생성. 이미 있거나 비밀번호 설정이 없으면 건너뜀"""
    if not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_PASSWORD not set, skipping admin seed")
        return None

    existing = member_crud.get_member_by_login_id(db, settings.ADMIN_LOGIN_ID)
    if existing:
        logger.info(f"Admin account already exists: {settings.ADMIN_LOGIN_ID!r}")
        return existing

    admin = member_crud.create_member(db, {
        "login_id": settings.ADMIN_LOGIN_ID,
        "nickname": settings.ADMIN_NICKNAME,
        "email": settings.ADMIN_EMAIL,
        "phone": settings.ADMIN_PHONE,
        "job": "ADMIN",
        "role": MemberRole.ADMIN.value,
        "password_hash": hasher.get_password_hash(settings.ADMIN_PASSWORD),
    })
    logger.info(f"Admin account created: member_no={admin.member_no}")
    return admin


if __name__ == "__main__":
    from app.config import settings
    from app.database import create_db_engine, create_session_factory

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    engine = create_db_engine(settings.DATABASE_URL)
    init_database(engine)
    db = create_session_factory(engine)()
    try:
        seed_admin(db, settings)
    finally:
        db.close()
