from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.services.member_service import member_service, parse_member_no
from app.schemas.member import (
    ActionResult, CheckResponse, MemberListResponse, MemberResponse,
    SignupForm, UpdateForm
)

router = APIRouter(prefix="/members", tags=["members"])


def _redirect_to_list(request: Request) -> RedirectResponse:
    """처리 후 회원목록으로 이동"""
    return RedirectResponse(
        url=str(request.url_for("get_members")),
        status_code=status.HTTP_303_SEE_OTHER
    )


def _render_result(request: Request, result: ActionResult):
    if result.ok:
        return _redirect_to_list(request)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=result.model_dump()
    )


@router.get("/", response_model=MemberListResponse)
def get_members(
        query: Optional[str] = Query(None, description="검색어 (아이디, 닉네임, 이메일)"),
        db: Session = Depends(get_db)
):
    """회원 목록 조회 (최신 가입순, 검색 포함)"""
    members = member_service.search(db=db, query=query)
    return MemberListResponse(
        data=[MemberResponse.model_validate(m) for m in members],
        total=len(members),
        query=(query or "").strip()
    )


@router.get("/check-id", response_model=CheckResponse)
def check_login_id(
        login_id: str = Query("", description="중복확인할 아이디"),
        db: Session = Depends(get_db)
):
    """아이디 중복확인"""
    return member_service.check_login_id(db=db, login_id=login_id)


@router.get("/check-nickname", response_model=CheckResponse)
def check_nickname(
        nickname: str = Query("", description="중복확인할 닉네임"),
        member_no: Optional[int] = Query(None, description="수정 중인 회원번호 (본인 닉네임 허용)"),
        db: Session = Depends(get_db)
):
    """닉네임 중복확인"""
    return member_service.check_nickname_for_update(db=db, member_no=member_no, nickname=nickname)


@router.post("/signup", responses={400: {"model": ActionResult}})
def signup(
        form: SignupForm,
        request: Request,
        db: Session = Depends(get_db)
):
    """회원가입. 성공 시 회원목록으로 이동"""
    result = member_service.signup(db=db, form=form)
    return _render_result(request, result)


@router.get("/{member_no}", response_model=MemberResponse)
def get_member(
        member_no: str,
        db: Session = Depends(get_db)
):
    """회원 정보 조회 (수정 화면용)"""
    number = parse_member_no(member_no)
    member = member_service.crud.get_member(db=db, member_no=number) if number else None
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.post("/{member_no}/edit", responses={400: {"model": ActionResult}})
def update_member(
        member_no: str,
        form: UpdateForm,
        request: Request,
        db: Session = Depends(get_db)
):
    """회원 정보 수정. 성공 시 회원목록으로 이동"""
    result = member_service.update(db=db, member_no=member_no, form=form)
    return _render_result(request, result)


@router.post("/{member_no}/delete")
@router.delete("/{member_no}")
def delete_member(
        member_no: str,
        request: Request,
        db: Session = Depends(get_db)
):
    """회원 삭제. 잘못된 번호이거나 없는 회원이어도 목록으로 이동"""
    member_service.delete(db=db, member_no=member_no)
    return _redirect_to_list(request)
