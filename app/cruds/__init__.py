# app/cruds/__init__.py
from .member import MemberCRUD, ConflictError, member_crud

__all__ = [
    "MemberCRUD", "ConflictError", "member_crud",
]
