from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import or_
from typing import Any, Dict, List, Optional
from app.models import Member

# 유니크 제약이 걸린 필드
UNIQUE_FIELDS = ("login_id", "nickname")


class ConflictError(Exception):
    """저장 시점에 유니크 제약(login_id / nickname)을 위반한 경우"""

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(f"Unique constraint violated: {', '.join(self.fields)}")


class MemberCRUD:
    def get_member(self, db: Session, member_no: int) -> Optional[Member]:
        return db.query(Member).filter(Member.member_no == member_no).first()

    def get_member_by_login_id(self, db: Session, login_id: str) -> Optional[Member]:
        return db.query(Member).filter(Member.login_id == login_id).first()

    def get_member_by_nickname(self, db: Session, nickname: str) -> Optional[Member]:
        return db.query(Member).filter(Member.nickname == nickname).first()

    def _conflicting_fields(
        self, db: Session, fields: Dict[str, Any], member_no: Optional[int] = None
    ) -> List[str]:
        """IntegrityError 이후 어떤 유니크 필드가 다른 회원과 겹치는지 재조회"""
        conflicts = []
        for field in UNIQUE_FIELDS:
            if field not in fields:
                continue
            query = db.query(Member).filter(getattr(Member, field) == fields[field])
            if member_no is not None:
                query = query.filter(Member.member_no != member_no)
            if query.first():
                conflicts.append(field)
        return conflicts

    def _commit(self, db: Session, fields: Dict[str, Any], member_no: Optional[int] = None):
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            conflicts = self._conflicting_fields(db, fields, member_no)
            if not conflicts:
                raise
            raise ConflictError(conflicts)

    def create_member(self, db: Session, fields: Dict[str, Any]) -> Member:
        """회원 생성. fields 에는 해시된 password_hash 가 들어 있어야 함"""
        db_member = Member(**fields)
        db.add(db_member)
        self._commit(db, fields)
        db.refresh(db_member)
        return db_member

    def update_member(self, db: Session, member_no: int, fields: Dict[str, Any]) -> Optional[Member]:
        db_member = self.get_member(db, member_no)
        if db_member:
            for key, value in fields.items():
                setattr(db_member, key, value)

            self._commit(db, fields, member_no)
            db.refresh(db_member)
        return db_member

    def delete_member(self, db: Session, member_no: int) -> bool:
        db_member = self.get_member(db, member_no)
        if db_member:
            db.delete(db_member)
            db.commit()
            return True
        return False

    def search_members(self, db: Session, query: Optional[str] = None) -> List[Member]:
        """아이디/닉네임/이메일 부분일치 검색 (최신 회원순)"""
        q = db.query(Member)

        # 검색어 필터
        if query:
            q = q.filter(
                or_(
                    Member.login_id.contains(query, autoescape=True),
                    Member.nickname.contains(query, autoescape=True),
                    Member.email.contains(query, autoescape=True)
                )
            )

        return q.order_by(Member.member_no.desc()).all()


# 전역 CRUD 인스턴스
member_crud = MemberCRUD()
