from passlib.context import CryptContext
from app.config import settings


def build_pwd_context(schemes: str = None, rounds: int = None) -> CryptContext:
    """비밀번호 해싱 컨텍스트 생성"""
    schemes = (schemes or settings.PASSWORD_HASH_SCHEMES).split(",")
    options = {}
    if "bcrypt" in schemes:
        options["bcrypt__rounds"] = rounds or settings.BCRYPT_ROUNDS
    return CryptContext(schemes=schemes, deprecated="auto", **options)


# 비밀번호 해싱 설정
pwd_context = build_pwd_context()


class AuthService:
    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """비밀번호 검증"""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def get_password_hash(password: str) -> str:
        """비밀번호 해싱"""
        return pwd_context.hash(password)
