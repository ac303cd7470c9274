from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.engine import Engine
from app.config import Settings, settings
from app.database import create_db_engine, create_session_factory
from app.init_db import init_database, seed_admin
from app.routes import member
import uvicorn
import logging

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시
    logger.info("Starting Member Board API")

    # 테이블 생성 및 관리자 계정 준비
    init_database(app.state.engine)
    db = app.state.session_factory()
    try:
        seed_admin(db, app.state.settings)
    finally:
        db.close()

    yield

    # 종료 시
    logger.info("Shutting down Member Board API")
    app.state.engine.dispose()


def create_app(app_settings: Settings = settings, engine: Engine = None) -> FastAPI:
    """앱 생성. DB 엔진과 세션 팩토리는 앱이 소유 (연결은 시작 시점에)"""
    if engine is None:
        engine = create_db_engine(app_settings.DATABASE_URL)

    # FastAPI 앱 초기화
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Member signup / edit / search API",
        version="1.0.0",
        openapi_url=f"{app_settings.API_V1_STR}/openapi.json",
        lifespan=lifespan
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.settings = app_settings

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(member.router, prefix=app_settings.API_V1_STR)

    # 기본 엔드포인트
    @app.get("/")
    def read_root():
        return {
            "message": "Member Board API",
            "version": "1.0.0",
            "docs_url": "/docs",
            "api_prefix": app_settings.API_V1_STR,
        }

    # 헬스체크 엔드포인트
    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "database_configured": bool(app_settings.DATABASE_URL)
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL
    )
