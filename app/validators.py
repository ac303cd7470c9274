"""회원 입력값 형식 검증

모든 함수는 통과 시 ``None``, 위반 시 필드 에러 메시지를 반환한다.
비밀번호를 제외한 값은 앞뒤 공백을 제거한 뒤 검사한다.
"""
import re
from typing import Dict, Optional

# 4~20자, 소문자로 시작, 이후 소문자/숫자/특수(!@#$%^&*()_-) 허용
LOGIN_ID_PATTERN = re.compile(r"[a-z][a-z0-9!@#$%^&*()_\-]{3,19}")

# 2~12자, 한글/영문으로 시작, 이후 한글/영문/숫자/_- 허용
NICKNAME_PATTERN = re.compile(r"[A-Za-z가-힣][A-Za-z0-9가-힣_\-]{1,11}")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
EMAIL_MAX_LENGTH = 50

PHONE_PATTERN = re.compile(r"[0-9\-]+")
PHONE_MAX_LENGTH = 50

PASSWORD_PATTERN = re.compile(r"[A-Za-z0-9!@#$%^&*()_\-]{4,20}")
PASSWORD_HAS_ALPHA = re.compile(r"[A-Za-z]")
PASSWORD_HAS_DIGIT = re.compile(r"[0-9]")

JOB_MAX_LENGTH = 20

# 필드 에러 메시지
LOGIN_ID_INVALID = "id format invalid"
NICKNAME_INVALID = "nickname format invalid"
EMAIL_INVALID = "email format invalid"
PHONE_INVALID = "phone format invalid"
PASSWORD_INVALID = "password format invalid"
PASSWORD_MISMATCH = "passwords do not match"
JOB_TOO_LONG = "job too long"
RECHECK_REQUIRED = "recheck required"
ALREADY_REGISTERED = "already registered"


def normalize(value: Optional[str]) -> str:
    return (value or "").strip()


def normalize_job(value: Optional[str]) -> Optional[str]:
    """빈 문자열은 '값 없음'으로 취급"""
    job = normalize(value)
    return job or None


def check_login_id(value: str) -> Optional[str]:
    if not LOGIN_ID_PATTERN.fullmatch(normalize(value)):
        return LOGIN_ID_INVALID
    return None


def check_nickname(value: str) -> Optional[str]:
    if not NICKNAME_PATTERN.fullmatch(normalize(value)):
        return NICKNAME_INVALID
    return None


def check_email(value: str) -> Optional[str]:
    email = normalize(value)
    if not email or len(email) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.fullmatch(email):
        return EMAIL_INVALID
    return None


def check_phone(value: str, strict: bool = False) -> Optional[str]:
    """숫자와 '-'만 허용. strict 이면 '-'로 시작/끝나거나 연속된 '--'도 거부"""
    phone = normalize(value)
    if not phone or len(phone) > PHONE_MAX_LENGTH or not PHONE_PATTERN.fullmatch(phone):
        return PHONE_INVALID
    if strict and (phone.startswith("-") or phone.endswith("-") or "--" in phone):
        return PHONE_INVALID
    return None


def check_password(value: str) -> Optional[str]:
    # 비밀번호는 trim 하지 않음
    password = value or ""
    if (
        not PASSWORD_PATTERN.fullmatch(password)
        or not PASSWORD_HAS_ALPHA.search(password)
        or not PASSWORD_HAS_DIGIT.search(password)
    ):
        return PASSWORD_INVALID
    return None


def check_password_confirm(password: str, password_confirm: str) -> Optional[str]:
    if (password or "") != (password_confirm or ""):
        return PASSWORD_MISMATCH
    return None


def check_job(value: Optional[str]) -> Optional[str]:
    job = normalize_job(value)
    if job is not None and len(job) > JOB_MAX_LENGTH:
        return JOB_TOO_LONG
    return None


def _collect(checks: Dict[str, Optional[str]]) -> Dict[str, str]:
    return {field: message for field, message in checks.items() if message}


def validate_signup(
    login_id: str,
    nickname: str,
    email: str,
    phone: str,
    password: str,
    password_confirm: str,
    job: Optional[str] = None,
) -> Dict[str, str]:
    """회원가입 입력값 전체 검증. 빈 dict 이면 통과"""
    return _collect({
        "login_id": check_login_id(login_id),
        "nickname": check_nickname(nickname),
        "email": check_email(email),
        "phone": check_phone(phone),
        "password": check_password(password),
        "password_confirm": check_password_confirm(password, password_confirm),
        "job": check_job(job),
    })


def validate_update(
    nickname: str,
    email: str,
    phone: str,
    password: Optional[str] = None,
    job: Optional[str] = None,
) -> Dict[str, str]:
    """회원정보 수정 입력값 전체 검증. 비밀번호는 입력한 경우에만 검사"""
    return _collect({
        "nickname": check_nickname(nickname),
        "email": check_email(email),
        "phone": check_phone(phone, strict=True),
        "password": check_password(password) if password else None,
        "job": check_job(job),
    })
