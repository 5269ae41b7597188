import re
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List
from zoneinfo import ZoneInfo

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from party_membership.core.config import Settings
from party_membership.core.constants import (
    MEMBER_STATUSES,
    MSG_DATABASE_ERROR,
    MSG_EMAIL_TAKEN,
    MSG_INVALID_MEMBER_ID,
    MSG_MEMBER_NOT_FOUND,
    MSG_NATIONAL_ID_TAKEN,
    MSG_NO_VALID_IDS,
    MSG_NOT_REGISTERED,
    PUBLIC_LIST_DEFAULT_LIMIT,
    PUBLIC_LIST_ORDER_COLUMNS,
)
from party_membership.core.errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from party_membership.core.logging import get_logger
from party_membership.core.validators import (
    RegistrationFields,
    validate_national_id,
    validate_registration,
)
from party_membership.db.models.member import Member, utcnow
from party_membership.repositories.member_repo import MemberRepository
from party_membership.repositories.sequence_repo import SequenceRepository
from party_membership.schemas.member import MemberLookupOut, MembershipStats

logger = get_logger("member_service")

PUBLIC_LIST_MAX_LIMIT = 100

# ASCII digits only; int() rejects superscripts that isdigit() lets through
MEMBER_ID_RE = re.compile(r"[0-9]+")


def _parse_member_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and MEMBER_ID_RE.fullmatch(value.strip()):
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


class MemberService:
    """
    Owns the member table and the membership counter.

    The session factory and settings are handed in by the caller, so the
    same registry can run against the application database or a test one.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        settings: Settings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._session_factory = session_factory
        self._settings = settings
        self._clock = clock

    @property
    def page_size(self) -> int:
        return self._settings.ADMIN_PAGE_SIZE

    def format_member_number(self, value: int) -> str:
        width = self._settings.MEMBER_NUMBER_WIDTH
        return f"{self._settings.MEMBER_NUMBER_PREFIX}{value:0{width}d}"

    def to_local(self, value: datetime) -> datetime:
        # SQLite hands back naive values; everything is stored in UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(ZoneInfo(self._settings.TIMEZONE))

    # -------------------------
    # REGISTER member
    # -------------------------
    def register(
        self,
        full_name: str | None,
        email: str | None,
        phone: str | None,
        national_id: str | None,
    ) -> Member:
        fields = validate_registration(full_name, email, phone, national_id)

        db = self._session_factory()
        try:
            # email is checked first, so a double collision reports the email
            if MemberRepository.exists_with_email(db, fields.email):
                raise ConflictError(MSG_EMAIL_TAKEN)

            if MemberRepository.exists_with_national_id(db, fields.national_id):
                raise ConflictError(MSG_NATIONAL_ID_TAKEN)

            number = SequenceRepository.next_value(
                db, self._settings.MEMBER_COUNTER_NAME
            )
            member = MemberRepository.create(
                db,
                fields,
                member_number=self.format_member_number(number),
                registered_at=self._clock(),
            )
            db.commit()

        except IntegrityError:
            # a concurrent registration won the unique constraint
            db.rollback()
            raise self._conflict_after_rollback(db, fields)

        except SQLAlchemyError:
            db.rollback()
            logger.exception("Member insert failed")
            raise StorageError(MSG_DATABASE_ERROR)

        finally:
            db.close()

        logger.info("Registered member %s (id=%s)", member.member_number, member.id)
        return member

    def _conflict_after_rollback(self, db: Session, fields: RegistrationFields):
        try:
            if MemberRepository.exists_with_email(db, fields.email):
                return ConflictError(MSG_EMAIL_TAKEN)
            if MemberRepository.exists_with_national_id(db, fields.national_id):
                return ConflictError(MSG_NATIONAL_ID_TAKEN)
        except SQLAlchemyError:
            logger.exception("Conflict lookup failed")
            return StorageError(MSG_DATABASE_ERROR)

        logger.error("Integrity error without email or ID collision")
        return StorageError(MSG_DATABASE_ERROR)

    # -------------------------
    # LOOKUP by national ID
    # -------------------------
    def lookup(self, national_id: str | None) -> MemberLookupOut:
        national_id = validate_national_id(national_id)

        db = self._session_factory()
        try:
            member = MemberRepository.get_by_national_id(db, national_id)
        except SQLAlchemyError:
            logger.exception("Membership lookup failed")
            raise StorageError(MSG_DATABASE_ERROR)
        finally:
            db.close()

        if member is None:
            raise NotFoundError(MSG_NOT_REGISTERED)

        registered = self.to_local(member.registered_at)
        expose_contact = self._settings.LOOKUP_EXPOSE_CONTACT

        return MemberLookupOut(
            member_number=member.member_number,
            full_name=member.full_name,
            email=member.email if expose_contact else None,
            phone=member.phone if expose_contact else None,
            registration_date=f"{registered:%B} {registered.day}, {registered.year}",
            status=MEMBER_STATUSES.get(member.status, member.status.capitalize()),
        )

    # -------------------------
    # LIST members (search + pagination)
    # -------------------------
    def list_members(
        self,
        search: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> tuple[List[Member], int]:
        search = (search or "").strip() or None
        page = max(1, page)
        page_size = page_size or self.page_size

        db = self._session_factory()
        try:
            return MemberRepository.list(
                db=db,
                search=search,
                page=page,
                page_size=page_size,
            )
        except SQLAlchemyError:
            logger.exception("Member listing failed")
            raise StorageError(MSG_DATABASE_ERROR)
        finally:
            db.close()

    # -------------------------
    # LIST active members (public display)
    # -------------------------
    def list_public(
        self,
        limit: int = PUBLIC_LIST_DEFAULT_LIMIT,
        order_by: str = "registered_at",
        order: str = "desc",
    ) -> List[Member]:
        if order_by not in PUBLIC_LIST_ORDER_COLUMNS:
            order_by, order = "registered_at", "desc"
        descending = (order or "").lower() != "asc"
        limit = min(max(1, limit), PUBLIC_LIST_MAX_LIMIT)

        db = self._session_factory()
        try:
            return MemberRepository.list_active(db, limit, order_by, descending)
        except SQLAlchemyError:
            logger.exception("Public member listing failed")
            raise StorageError(MSG_DATABASE_ERROR)
        finally:
            db.close()

    # -------------------------
    # STATS
    # -------------------------
    def get_stats(
        self,
        show_total: bool = True,
        show_today: bool = True,
        show_this_month: bool = True,
        show_this_year: bool = True,
    ) -> MembershipStats:
        now = self.to_local(self._clock())
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        boundaries = {
            "total": (show_total, None),
            "today": (show_today, start_of_day),
            "month": (show_this_month, start_of_day.replace(day=1)),
            "year": (show_this_year, start_of_day.replace(month=1, day=1)),
        }

        stats = {}
        db = self._session_factory()
        try:
            for key, (wanted, since) in boundaries.items():
                if not wanted:
                    continue
                if since is not None:
                    since = since.astimezone(timezone.utc)
                stats[key] = MemberRepository.count_active(db, since)
        except SQLAlchemyError:
            logger.exception("Membership stats failed")
            raise StorageError(MSG_DATABASE_ERROR)
        finally:
            db.close()

        return MembershipStats(**stats)

    # -------------------------
    # HARD DELETE member
    # -------------------------
    def delete_member(self, member_id: Any) -> str:
        parsed_id = _parse_member_id(member_id)
        if parsed_id is None:
            raise ValidationError(MSG_INVALID_MEMBER_ID)

        db = self._session_factory()
        try:
            member = MemberRepository.get_by_id(db, parsed_id)
            if not member:
                raise NotFoundError(MSG_MEMBER_NOT_FOUND)

            full_name = member.full_name
            MemberRepository.delete(db, member)
            db.commit()

        except SQLAlchemyError:
            db.rollback()
            logger.exception("Member delete failed (id=%s)", parsed_id)
            raise StorageError(MSG_DATABASE_ERROR)

        finally:
            db.close()

        logger.info("Deleted member id=%s", parsed_id)
        return full_name

    # -------------------------
    # BULK DELETE members
    # -------------------------
    def delete_members(self, member_ids: Iterable[Any]) -> int:
        valid_ids = sorted(
            {
                parsed
                for parsed in (_parse_member_id(v) for v in member_ids)
                if parsed is not None
            }
        )
        if not valid_ids:
            raise ValidationError(MSG_NO_VALID_IDS)

        db = self._session_factory()
        try:
            deleted = MemberRepository.delete_many(db, valid_ids)
            db.commit()

        except SQLAlchemyError:
            db.rollback()
            logger.exception("Bulk delete failed")
            raise StorageError(MSG_DATABASE_ERROR)

        finally:
            db.close()

        logger.info("Bulk deleted %s of %s requested members", deleted, len(valid_ids))
        return deleted
