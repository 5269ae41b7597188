from fastapi import Depends, Header, status

from party_membership.core.config import Settings, settings
from party_membership.core.constants import (
    MSG_ADMIN_KEY_REQUIRED,
    MSG_PERMISSION_DENIED,
    MSG_SECURITY_CHECK_FAILED,
)
from party_membership.core.errors import AuthorizationError
from party_membership.core.security import NonceStore, verify_admin_key
from party_membership.db.session import SessionLocal
from party_membership.services.member_service import MemberService
from party_membership.services.render_service import RenderService

nonce_store = NonceStore(ttl_seconds=settings.NONCE_TTL_SECONDS)


def get_settings() -> Settings:
    return settings


def get_nonce_store() -> NonceStore:
    return nonce_store


def get_member_service(
    app_settings: Settings = Depends(get_settings),
) -> MemberService:
    return MemberService(SessionLocal, app_settings)


def get_render_service(
    members: MemberService = Depends(get_member_service),
) -> RenderService:
    return RenderService(members)


# -------------------------
# ADMIN PRECONDITIONS
# -------------------------
def require_admin(
    x_admin_key: str | None = Header(None, alias="X-Admin-Key"),
    app_settings: Settings = Depends(get_settings),
) -> None:
    if not x_admin_key:
        raise AuthorizationError(
            MSG_ADMIN_KEY_REQUIRED,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not verify_admin_key(x_admin_key, app_settings.ADMIN_KEY_HASH):
        raise AuthorizationError(MSG_PERMISSION_DENIED)


def require_nonce(
    x_admin_nonce: str | None = Header(None, alias="X-Admin-Nonce"),
    store: NonceStore = Depends(get_nonce_store),
) -> None:
    if not store.consume(x_admin_nonce):
        raise AuthorizationError(MSG_SECURITY_CHECK_FAILED)
