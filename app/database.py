from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.models import Base


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """DATABASE_URL로 SQLAlchemy Engine 생성"""
    connect_args = kwargs.pop("connect_args", {})
    # SQLite는 요청 스레드가 바뀌어도 같은 연결을 쓸 수 있어야 함
    if database_url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    return create_engine(database_url, connect_args=connect_args, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_models(engine: Engine) -> None:
    """테이블 생성 (없는 경우에만)"""
    Base.metadata.create_all(bind=engine)


# Dependency (의존성 주입) 함수
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
