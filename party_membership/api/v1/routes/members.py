import math

from fastapi import APIRouter, Depends, Query, status

from party_membership.api.deps import (
    get_member_service,
    get_nonce_store,
    require_admin,
    require_nonce,
)
from party_membership.core.security import NonceStore
from party_membership.schemas.common import MessageResponse
from party_membership.schemas.member import (
    BulkDeleteOut,
    BulkDeleteRequest,
    DeleteOut,
    MemberOut,
    MemberPage,
    MemberRegister,
    MembershipStats,
)
from party_membership.services.member_service import MemberService

# every route here needs the admin key; mutations also need a fresh nonce
router = APIRouter(dependencies=[Depends(require_admin)])


# -------------------------
# ISSUE nonce
# -------------------------
@router.get("/nonce", response_model=MessageResponse[str])
def issue_nonce(store: NonceStore = Depends(get_nonce_store)):
    return {
        "message": "Nonce issued",
        "data": store.issue(),
    }


# -------------------------
# LIST members (search + pagination)
# -------------------------
@router.get("/members", response_model=MessageResponse[MemberPage])
def list_members(
    search: str | None = None,
    page: int = Query(1),
    members: MemberService = Depends(get_member_service),
    store: NonceStore = Depends(get_nonce_store),
):
    page = max(1, page)
    items, total = members.list_members(search=search, page=page)
    return {
        "message": "Members fetched successfully",
        "data": {
            "items": items,
            "total": total,
            "page": page,
            "page_size": members.page_size,
            "total_pages": math.ceil(total / members.page_size),
            "search": search,
            "nonce": store.issue(),
        },
    }


# -------------------------
# CREATE member (manual entry)
# -------------------------
@router.post(
    "/members",
    response_model=MessageResponse[MemberOut],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_nonce)],
)
def add_member(
    payload: MemberRegister,
    members: MemberService = Depends(get_member_service),
):
    member = members.register(
        payload.full_name,
        payload.email,
        payload.phone,
        payload.national_id,
    )
    return {
        "message": f"Member successfully added with number: {member.member_number}",
        "data": member,
    }


# -------------------------
# BULK DELETE (permanent)
# -------------------------
@router.post(
    "/members/bulk-delete",
    response_model=MessageResponse[BulkDeleteOut],
    dependencies=[Depends(require_nonce)],
)
def bulk_delete_members(
    payload: BulkDeleteRequest,
    members: MemberService = Depends(get_member_service),
):
    deleted = members.delete_members(payload.ids)
    noun = "member has" if deleted == 1 else "members have"
    return {
        "message": f"{deleted} {noun} been successfully deleted.",
        "data": {"deleted_count": deleted},
    }


# -------------------------
# HARD DELETE (permanent)
# -------------------------
@router.delete(
    "/members/{member_id}",
    response_model=MessageResponse[DeleteOut],
    dependencies=[Depends(require_nonce)],
)
def delete_member(
    member_id: int,
    members: MemberService = Depends(get_member_service),
):
    full_name = members.delete_member(member_id)
    return {
        "message": f'Member "{full_name}" has been successfully deleted.',
        "data": {"id": member_id, "full_name": full_name},
    }


# -------------------------
# STATS
# -------------------------
@router.get("/stats", response_model=MessageResponse[MembershipStats])
def membership_stats(members: MemberService = Depends(get_member_service)):
    return {
        "message": "Stats fetched successfully",
        "data": members.get_stats(),
    }
