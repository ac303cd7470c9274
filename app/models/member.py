import enum
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from . import Base


class MemberRole(str, enum.Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class Member(Base):
    __tablename__ = "members"
    # 삭제된 회원번호가 재사용되지 않도록 (SQLite)
    __table_args__ = {"sqlite_autoincrement": True}

    member_no = Column(Integer, primary_key=True, autoincrement=True)
    # 기본 정보
    login_id = Column(String(20), unique=True, nullable=False, index=True)
    nickname = Column(String(12), unique=True, nullable=False, index=True)
    email = Column(String(50), nullable=False)

    # 비밀번호 관련 (해시된 값만 저장)
    password_hash = Column(String(255), nullable=False)

    # 연락처
    phone = Column(String(50), nullable=False)

    # 직업 (선택)
    job = Column(String(20))

    # 역할 구분
    role = Column(String(20), nullable=False, default=MemberRole.MEMBER.value)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
