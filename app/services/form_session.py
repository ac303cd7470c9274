from typing import Dict, Optional
from app.schemas.member import (
    ActionResult,
    AvailabilityCheck,
    CheckResponse,
    SignupForm,
    UpdateForm,
)

# 입력값이 바뀌면 중복확인을 다시 해야 하는 필드
SIGNUP_TRACKED_FIELDS = ("login_id", "nickname")
UPDATE_TRACKED_FIELDS = ("nickname",)

SECRET_FIELDS = ("password", "password_confirm")


class MemberFormSession:
    """한 사용자가 작성 중인 회원가입/수정 폼 상태 (API 를 호출하는 클라이언트 쪽 헬퍼)

    입력값과 마지막 중복확인 결과를 들고 있다가 제출 시 폼으로 만들어 준다.
    추적 대상 필드를 수정하면 해당 필드의 중복확인 결과는 무효가 된다.
    """

    def __init__(self, tracked_fields=SIGNUP_TRACKED_FIELDS, values: Optional[Dict[str, str]] = None):
        self.tracked_fields = tuple(tracked_fields)
        self.values: Dict[str, str] = dict(values or {})
        self.checks: Dict[str, Optional[AvailabilityCheck]] = {field: None for field in self.tracked_fields}
        self.field_errors: Dict[str, str] = {}
        self.message = ""

    @classmethod
    def for_update(cls, member) -> "MemberFormSession":
        """기존 회원 정보로 수정 폼 시작"""
        return cls(
            tracked_fields=UPDATE_TRACKED_FIELDS,
            values={
                "nickname": member.nickname,
                "email": member.email,
                "phone": member.phone,
                "job": member.job or "",
                "original_nickname": member.nickname,
            },
        )

    def edit(self, field: str, value: str) -> None:
        self.values[field] = value
        if field in self.checks:
            self.checks[field] = None

    def record_check(self, field: str, checked_value: str, response: CheckResponse) -> None:
        """checked_value: 중복확인을 요청할 당시의 입력값"""
        if field not in self.checks:
            raise KeyError(f"{field} is not tracked for availability checks")
        # 확인하는 사이에 값이 바뀌었으면 결과를 버림
        if self.values.get(field, "") != checked_value:
            return
        self.checks[field] = AvailabilityCheck(value=checked_value.strip(), ok=response.ok)

    def is_checked(self, field: str) -> bool:
        check = self.checks.get(field)
        return check is not None and check.ok

    def build_signup_form(self) -> SignupForm:
        return SignupForm(
            login_id=self.values.get("login_id", ""),
            nickname=self.values.get("nickname", ""),
            email=self.values.get("email", ""),
            phone=self.values.get("phone", ""),
            password=self.values.get("password", ""),
            password_confirm=self.values.get("password_confirm", ""),
            job=self.values.get("job", ""),
            login_id_check=self.checks.get("login_id"),
            nickname_check=self.checks.get("nickname"),
        )

    def build_update_form(self) -> UpdateForm:
        return UpdateForm(
            nickname=self.values.get("nickname", ""),
            email=self.values.get("email", ""),
            phone=self.values.get("phone", ""),
            password=self.values.get("password", ""),
            job=self.values.get("job", ""),
            original_nickname=self.values.get("original_nickname", ""),
            nickname_check=self.checks.get("nickname"),
        )

    def apply_result(self, result: ActionResult) -> None:
        """실패 시 비밀번호 입력만 비우고 나머지 값은 유지"""
        self.message = result.message
        if result.ok:
            self.field_errors = {}
            return
        self.field_errors = dict(result.field_errors)
        for field in SECRET_FIELDS:
            self.values[field] = ""
