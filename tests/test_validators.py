import pytest

from app import validators


class TestLoginId:
    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("abc1", True),
            ("abcd", True),
            ("a" * 20, True),
            ("user_01!", True),
            ("a!@#$%^&*()_-", True),
            ("  hong01  ", True),
            ("abc", False),
            ("a" * 21, False),
            ("Abc123", False),
            ("1abc", False),
            ("_abc", False),
            ("abcD", False),
            ("ab cd", False),
            ("", False),
        ],
    )
    def test_check_login_id(self, raw: str, ok: bool):
        """아이디는 소문자로 시작하는 4~20자만 허용한다.

        Given 다양한 아이디 후보
        When check_login_id(raw)를 호출할 때
        Then 규칙을 만족하면 None, 아니면 id 형식 에러
        """
        expected = None if ok else validators.LOGIN_ID_INVALID
        assert validators.check_login_id(raw) == expected


class TestNickname:
    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("홍길", True),
            ("관리자", True),
            ("ab", True),
            ("Neo_99-x", True),
            ("한글abc123", True),
            ("가" * 12, True),
            ("가" * 13, False),
            ("a", False),
            ("1abc", False),
            ("_abc", False),
            ("-abc", False),
            ("ab cd", False),
            ("ab!", False),
            ("", False),
        ],
    )
    def test_check_nickname(self, raw: str, ok: bool):
        """닉네임은 한글/영문으로 시작하는 2~12자만 허용한다."""
        expected = None if ok else validators.NICKNAME_INVALID
        assert validators.check_nickname(raw) == expected


class TestEmail:
    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("hong@example.com", True),
            (" a.b+tag@ex.co ", True),
            ("no-at.example.com", False),
            ("a@b", False),
            ("a@@b.com", False),
            ("a b@c.com", False),
            ("", False),
            ("a" * 40 + "@example.com", False),
        ],
    )
    def test_check_email(self, raw: str, ok: bool):
        expected = None if ok else validators.EMAIL_INVALID
        assert validators.check_email(raw) == expected


class TestPhone:
    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("010-1234-5678", True),
            ("01012345678", True),
            ("010--1234", True),
            ("-010", True),
            ("010-12a4", False),
            ("0" * 50, True),
            ("0" * 51, False),
            ("010 1234", False),
            ("", False),
        ],
    )
    def test_charset_only(self, raw: str, ok: bool):
        """기본 검사는 숫자와 '-' 구성만 본다."""
        expected = None if ok else validators.PHONE_INVALID
        assert validators.check_phone(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("010-1234-5678", True),
            ("010--1234", False),
            ("-0101234", False),
            ("0101234-", False),
        ],
    )
    def test_strict(self, raw: str, ok: bool):
        """strict 검사는 '-'의 위치와 연속까지 본다.

        Given 글자 단위로는 허용되는 전화번호
        When strict=True 로 검사할 때
        Then 앞/뒤 '-' 또는 '--'가 있으면 거부한다
        """
        expected = None if ok else validators.PHONE_INVALID
        assert validators.check_phone(raw, strict=True) == expected


class TestPassword:
    @pytest.mark.parametrize(
        ("raw", "ok"),
        [
            ("ab12", True),
            ("Pass1234!", True),
            ("a1" * 10, True),
            ("a1" * 10 + "x", False),
            ("abcd", False),
            ("1234", False),
            ("a1", False),
            ("pass 1234", False),
            ("pass1234+", False),
            (" pass1234", False),
            ("", False),
        ],
    )
    def test_check_password(self, raw: str, ok: bool):
        """비밀번호는 trim 없이 4~20자, 영문과 숫자를 모두 포함해야 한다."""
        expected = None if ok else validators.PASSWORD_INVALID
        assert validators.check_password(raw) == expected

    def test_confirm_compares_raw_values(self):
        assert validators.check_password_confirm("pass1234", "pass1234") is None
        assert validators.check_password_confirm("pass1234", "pass1234 ") == validators.PASSWORD_MISMATCH


class TestJob:
    def test_empty_job_is_absent(self):
        assert validators.normalize_job("   ") is None
        assert validators.check_job("") is None
        assert validators.check_job(None) is None

    def test_job_length(self):
        assert validators.check_job("a" * 20) is None
        assert validators.check_job("a" * 21) == validators.JOB_TOO_LONG


class TestValidateSignup:
    def test_valid_input_has_no_errors(self):
        errors = validators.validate_signup(
            login_id="hong01",
            nickname="홍길동",
            email="hong@example.com",
            phone="010-1234-5678",
            password="pass1234",
            password_confirm="pass1234",
        )
        assert errors == {}

    def test_collects_every_error(self):
        """한 번의 검증에서 위반한 모든 필드를 모아서 돌려준다."""
        errors = validators.validate_signup(
            login_id="Abc123",
            nickname="1nick",
            email="nope",
            phone="phone",
            password="abcd",
            password_confirm="abce",
            job="x" * 21,
        )
        assert errors == {
            "login_id": validators.LOGIN_ID_INVALID,
            "nickname": validators.NICKNAME_INVALID,
            "email": validators.EMAIL_INVALID,
            "phone": validators.PHONE_INVALID,
            "password": validators.PASSWORD_INVALID,
            "password_confirm": validators.PASSWORD_MISMATCH,
            "job": validators.JOB_TOO_LONG,
        }


class TestValidateUpdate:
    def test_password_optional(self):
        errors = validators.validate_update(
            nickname="홍길동", email="hong@example.com", phone="010-1234-5678", password=""
        )
        assert errors == {}

    def test_phone_is_strict(self):
        errors = validators.validate_update(
            nickname="홍길동", email="hong@example.com", phone="010--1234"
        )
        assert errors == {"phone": validators.PHONE_INVALID}

    def test_supplied_password_is_checked(self):
        errors = validators.validate_update(
            nickname="홍길동", email="hong@example.com", phone="010-1234-5678", password="abcd"
        )
        assert errors == {"password": validators.PASSWORD_INVALID}
