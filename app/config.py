import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

class Settings:
    # 필수 환경변수
    DATABASE_URL: str = os.getenv("DATABASE_URL")

    # 선택적 환경변수 (기본값 포함)
    API_V1_STR: str = os.getenv("API_V1_STR", "/api/v1")
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Member Board API")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")

    # 비밀번호 해싱 설정
    PASSWORD_HASH_SCHEMES: str = os.getenv("PASSWORD_HASH_SCHEMES", "bcrypt")
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # 초기 관리자 계정 (비밀번호가 없으면 생성하지 않음)
    ADMIN_LOGIN_ID: str = os.getenv("ADMIN_LOGIN_ID", "admin1")
    ADMIN_NICKNAME: str = os.getenv("ADMIN_NICKNAME", "관리자")
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PHONE: str = os.getenv("ADMIN_PHONE", "010-0000-0000")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")

    def __init__(self):
        # 필수 환경변수 체크
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL environment variable is required")

        # bcrypt cost 범위 체크
        if not 4 <= self.BCRYPT_ROUNDS <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")

settings = Settings()
