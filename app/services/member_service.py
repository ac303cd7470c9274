import logging
import math
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from app import validators
from app.auth import AuthService
from app.cruds.member import ConflictError, MemberCRUD, member_crud
from app.models import Member
from app.schemas.member import (
    ActionResult,
    AvailabilityCheck,
    CheckResponse,
    SignupForm,
    UpdateForm,
)

logger = logging.getLogger(__name__)

# 사용자에게 보여줄 요약 메시지
MSG_CHECK_INPUT = "Please check your input."
MSG_INVALID_REQUEST = "Invalid request."
MSG_MEMBER_NOT_FOUND = "Member not found."
MSG_RECHECK_LOGIN_ID = "Please check login id availability again."
MSG_RECHECK_NICKNAME = "Please check nickname availability again."
MSG_LOGIN_ID_TAKEN = "Login id is already registered."
MSG_NICKNAME_TAKEN = "Nickname is already registered."
MSG_LOGIN_ID_AVAILABLE = "Login id is available."
MSG_NICKNAME_AVAILABLE = "Nickname is available."
MSG_SIGNUP_DONE = "Signup completed."
MSG_UPDATE_DONE = "Member updated."

# members.member_no (INTEGER) 컬럼이 담을 수 있는 최대값
MAX_MEMBER_NO = 2 ** 31 - 1

_TAKEN_MESSAGES = {
    "login_id": MSG_LOGIN_ID_TAKEN,
    "nickname": MSG_NICKNAME_TAKEN,
}


def parse_member_no(raw: Any) -> Optional[int]:
    """회원번호를 양의 정수로 변환. 올바르지 않으면 None"""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        try:
            value = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
            if not math.isfinite(number) or not number.is_integer():
                return None
            value = int(number)
    return value if 0 < value <= MAX_MEMBER_NO else None


def _is_fresh(check: Optional[AvailabilityCheck], value: str) -> bool:
    """중복확인이 성공했고, 확인한 값이 현재 값과 같은지"""
    return check is not None and check.ok and check.value == value


class MemberService:
    """회원가입/수정/삭제/검색 워크플로우"""

    def __init__(self, crud: MemberCRUD = member_crud, hasher=AuthService):
        self.crud = crud
        self.hasher = hasher

    # 중복확인 ------------------------------------------------------------

    def check_login_id(self, db: Session, login_id: str) -> CheckResponse:
        value = validators.normalize(login_id)
        error = validators.check_login_id(value)
        if error:
            return CheckResponse(ok=False, message=error)

        exists = self.crud.get_member_by_login_id(db, value)
        logger.debug(f"Login id availability check: {value!r} taken={exists is not None}")
        if exists:
            return CheckResponse(ok=False, message=MSG_LOGIN_ID_TAKEN)
        return CheckResponse(ok=True, message=MSG_LOGIN_ID_AVAILABLE)

    def check_nickname(self, db: Session, nickname: str) -> CheckResponse:
        return self.check_nickname_for_update(db, None, nickname)

    def check_nickname_for_update(
        self, db: Session, member_no: Optional[int], nickname: str
    ) -> CheckResponse:
        """member_no 가 주어지면 본인의 현재 닉네임은 사용 가능으로 판단"""
        value = validators.normalize(nickname)
        error = validators.check_nickname(value)
        if error:
            return CheckResponse(ok=False, message=error)

        exists = self.crud.get_member_by_nickname(db, value)
        taken = exists is not None and exists.member_no != member_no
        logger.debug(f"Nickname availability check: {value!r} taken={taken}")
        if taken:
            return CheckResponse(ok=False, message=MSG_NICKNAME_TAKEN)
        return CheckResponse(ok=True, message=MSG_NICKNAME_AVAILABLE)

    # 회원가입 ------------------------------------------------------------

    def signup(self, db: Session, form: SignupForm) -> ActionResult:
        login_id = validators.normalize(form.login_id)
        nickname = validators.normalize(form.nickname)
        email = validators.normalize(form.email)
        phone = validators.normalize(form.phone)
        job = validators.normalize(form.job)

        values = {
            "login_id": login_id,
            "nickname": nickname,
            "email": email,
            "phone": phone,
            "job": job,
        }

        def reject(message: str, field_errors: Dict[str, str]) -> ActionResult:
            return ActionResult(ok=False, message=message, field_errors=field_errors, values=values)

        # 1~2. 형식 검증 (모든 에러를 한번에 수집)
        errors = validators.validate_signup(
            login_id=login_id,
            nickname=nickname,
            email=email,
            phone=phone,
            password=form.password,
            password_confirm=form.password_confirm,
            job=job,
        )
        if errors:
            return reject(MSG_CHECK_INPUT, errors)

        # 3~4. 중복확인 이후 값이 바뀌지 않았는지
        if not _is_fresh(form.login_id_check, login_id):
            return reject(MSG_RECHECK_LOGIN_ID, {"login_id": validators.RECHECK_REQUIRED})
        if not _is_fresh(form.nickname_check, nickname):
            return reject(MSG_RECHECK_NICKNAME, {"nickname": validators.RECHECK_REQUIRED})

        # 5. 최종 중복 체크 (중복확인 ~ 저장 사이의 경쟁 방지)
        if self.crud.get_member_by_login_id(db, login_id):
            logger.warning(f"Signup rejected, login id taken before commit: {login_id!r}")
            return reject(MSG_LOGIN_ID_TAKEN, {"login_id": validators.ALREADY_REGISTERED})
        if self.crud.get_member_by_nickname(db, nickname):
            logger.warning(f"Signup rejected, nickname taken before commit: {nickname!r}")
            return reject(MSG_NICKNAME_TAKEN, {"nickname": validators.ALREADY_REGISTERED})

        # 6~7. 해싱 후 저장
        fields = {
            "login_id": login_id,
            "nickname": nickname,
            "email": email,
            "phone": phone,
            "job": validators.normalize_job(job),
            "password_hash": self.hasher.get_password_hash(form.password),
        }
        try:
            member = self.crud.create_member(db, fields)
        except ConflictError as e:
            logger.warning(f"Signup hit unique constraint on {e.fields}")
            return self._conflict_result(e, values)

        # 8. 성공
        logger.info(f"Member signed up: member_no={member.member_no} login_id={member.login_id!r}")
        return ActionResult(ok=True, message=MSG_SIGNUP_DONE)

    # 회원정보 수정 ---------------------------------------------------------

    def update(self, db: Session, member_no: Any, form: UpdateForm) -> ActionResult:
        number = parse_member_no(member_no)
        if number is None:
            return ActionResult(ok=False, message=MSG_INVALID_REQUEST)
        if self.crud.get_member(db, number) is None:
            return ActionResult(ok=False, message=MSG_MEMBER_NOT_FOUND)

        nickname = validators.normalize(form.nickname)
        email = validators.normalize(form.email)
        phone = validators.normalize(form.phone)
        job = validators.normalize(form.job)
        password = form.password  # 선택 입력

        values = {
            "nickname": nickname,
            "email": email,
            "phone": phone,
            "job": job,
            "original_nickname": form.original_nickname,
        }

        def reject(message: str, field_errors: Dict[str, str]) -> ActionResult:
            return ActionResult(ok=False, message=message, field_errors=field_errors, values=values)

        errors = validators.validate_update(
            nickname=nickname,
            email=email,
            phone=phone,
            password=password,
            job=job,
        )
        if errors:
            return reject(MSG_CHECK_INPUT, errors)

        # 닉네임이 바뀐 경우에만 중복확인 강제
        if nickname != form.original_nickname and not _is_fresh(form.nickname_check, nickname):
            return reject(MSG_RECHECK_NICKNAME, {"nickname": validators.RECHECK_REQUIRED})

        # 최종 중복 체크 (본인 제외)
        exists = self.crud.get_member_by_nickname(db, nickname)
        if exists and exists.member_no != number:
            logger.warning(f"Update rejected, nickname taken before commit: {nickname!r}")
            return reject(MSG_NICKNAME_TAKEN, {"nickname": validators.ALREADY_REGISTERED})

        fields = {
            "nickname": nickname,
            "email": email,
            "phone": phone,
            "job": validators.normalize_job(job),
        }
        # 비밀번호를 입력한 경우에만 변경
        if password:
            fields["password_hash"] = self.hasher.get_password_hash(password)

        try:
            member = self.crud.update_member(db, number, fields)
        except ConflictError as e:
            logger.warning(f"Update of member {number} hit unique constraint on {e.fields}")
            return self._conflict_result(e, values)

        if member is None:
            return ActionResult(ok=False, message=MSG_MEMBER_NOT_FOUND)

        logger.info(f"Member updated: member_no={number}")
        return ActionResult(ok=True, message=MSG_UPDATE_DONE)

    # 삭제 / 검색 ---------------------------------------------------------

    def delete(self, db: Session, member_no: Any) -> bool:
        """회원 삭제. 잘못된 번호이거나 없는 회원이면 아무것도 하지 않음"""
        number = parse_member_no(member_no)
        if number is None:
            return False

        deleted = self.crud.delete_member(db, number)
        if deleted:
            logger.info(f"Member deleted: member_no={number}")
        return deleted

    def search(self, db: Session, query: Optional[str] = None) -> List[Member]:
        return self.crud.search_members(db, validators.normalize(query))

    def _conflict_result(self, error: ConflictError, values: Dict[str, str]) -> ActionResult:
        field_errors = {field: validators.ALREADY_REGISTERED for field in error.fields}
        message = _TAKEN_MESSAGES.get(error.fields[0], MSG_CHECK_INPUT)
        return ActionResult(ok=False, message=message, field_errors=field_errors, values=values)


member_service = MemberService()
