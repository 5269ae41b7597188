from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List
from datetime import datetime


# -------------------------
# REGISTER (public form + admin manual add)
# -------------------------
class MemberRegister(BaseModel):
    # kept as loose strings: the registry reports the first bad field itself
    full_name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    national_id: Optional[str] = ""


# -------------------------
# LOOKUP
# -------------------------
class MembershipCheck(BaseModel):
    national_id: Optional[str] = ""


class MemberLookupOut(BaseModel):
    member_number: str
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    registration_date: str
    status: str


# -------------------------
# BULK DELETE
# -------------------------
class BulkDeleteRequest(BaseModel):
    ids: List[Any] = Field(default_factory=list)


class BulkDeleteOut(BaseModel):
    deleted_count: int


class DeleteOut(BaseModel):
    id: int
    full_name: str


# -------------------------
# OUTPUT
# -------------------------
class MemberOut(BaseModel):
    id: int
    member_number: str
    full_name: str
    email: str
    phone: str
    national_id: str
    registered_at: datetime
    status: str

    model_config = ConfigDict(from_attributes=True)


class RegistrationOut(BaseModel):
    member_number: str


class MemberPage(BaseModel):
    items: List[MemberOut]
    total: int
    page: int
    page_size: int
    total_pages: int
    search: Optional[str] = None
    nonce: str


# -------------------------
# STATS
# -------------------------
class MembershipStats(BaseModel):
    total: Optional[int] = None
    today: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None
