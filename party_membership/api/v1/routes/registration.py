from fastapi import APIRouter, Depends, status

from party_membership.api.deps import get_member_service
from party_membership.schemas.common import MessageResponse
from party_membership.schemas.member import (
    MemberLookupOut,
    MemberRegister,
    MembershipCheck,
    RegistrationOut,
)
from party_membership.services.member_service import MemberService

router = APIRouter()


# REGISTER (public form)
@router.post(
    "/register",
    response_model=MessageResponse[RegistrationOut],
    status_code=status.HTTP_201_CREATED,
)
def register_member(
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
        "message": "Registration successful!",
        "data": {"member_number": member.member_number},
    }


# CHECK membership by national ID
@router.post("/check", response_model=MessageResponse[MemberLookupOut])
def check_membership(
    payload: MembershipCheck,
    members: MemberService = Depends(get_member_service),
):
    return {
        "message": "Membership found",
        "data": members.lookup(payload.national_id),
    }
