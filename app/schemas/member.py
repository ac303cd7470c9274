from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict
from datetime import datetime


# 중복확인 결과 (클라이언트가 마지막으로 확인한 값과 결과)
class AvailabilityCheck(BaseModel):
    value: str  # 확인 당시의 입력값
    ok: bool  # 사용 가능 여부


# 회원가입 폼
class SignupForm(BaseModel):
    login_id: str = ""  # 아이디
    nickname: str = ""  # 닉네임
    email: str = ""
    phone: str = ""  # 연락처
    password: str = ""
    password_confirm: str = ""  # 비밀번호 재입력
    job: str = ""  # 직업 (선택)

    login_id_check: Optional[AvailabilityCheck] = None
    nickname_check: Optional[AvailabilityCheck] = None


# 회원정보 수정 폼 (아이디는 변경 불가)
class UpdateForm(BaseModel):
    nickname: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""  # 비워두면 기존 비밀번호 유지
    job: str = ""

    original_nickname: str = ""  # 닉네임 변경 감지용
    nickname_check: Optional[AvailabilityCheck] = None


class CheckResponse(BaseModel):
    ok: bool
    message: str


class ActionResult(BaseModel):
    ok: bool
    message: str
    field_errors: Dict[str, str] = Field(default_factory=dict)
    # 비밀번호를 제외한 입력값 (폼 복구용)
    values: Dict[str, str] = Field(default_factory=dict)


class MemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    member_no: int
    login_id: str
    nickname: str
    email: str
    phone: str
    job: Optional[str] = None
    role: str
    created_at: datetime


class MemberListResponse(BaseModel):
    data: List[MemberResponse]
    total: int
    query: str = ""
