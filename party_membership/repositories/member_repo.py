from datetime import datetime
from typing import Iterable, List

from sqlalchemy.orm import Session
from sqlalchemy import select, func, delete, or_

from party_membership.db.models.member import Member
from party_membership.core.validators import RegistrationFields


class MemberRepository:

    # -------------------------
    # CREATE
    # -------------------------
    @staticmethod
    def create(
        db: Session,
        fields: RegistrationFields,
        member_number: str,
        registered_at: datetime,
    ) -> Member:
        member = Member(
            member_number=member_number,
            full_name=fields.full_name,
            email=fields.email,
            phone=fields.phone,
            national_id=fields.national_id,
            registered_at=registered_at,
            status="active",
        )
        db.add(member)
        db.flush()
        return member

    # -------------------------
    # GET BY ID
    # -------------------------
    @staticmethod
    def get_by_id(db: Session, member_id: int) -> Member | None:
        return db.get(Member, member_id)

    # -------------------------
    # GET BY NATIONAL ID
    # -------------------------
    @staticmethod
    def get_by_national_id(db: Session, national_id: str) -> Member | None:
        stmt = select(Member).where(Member.national_id == national_id)
        return db.execute(stmt).scalars().first()

    # -------------------------
    # DUPLICATION CHECKS
    # -------------------------
    @staticmethod
    def exists_with_email(db: Session, email: str) -> bool:
        stmt = select(Member.id).where(func.lower(Member.email) == email.lower())
        return db.execute(stmt).first() is not None

    @staticmethod
    def exists_with_national_id(db: Session, national_id: str) -> bool:
        stmt = select(Member.id).where(Member.national_id == national_id)
        return db.execute(stmt).first() is not None

    # -------------------------
    # LIST (search + pagination)
    # -------------------------
    @staticmethod
    def list(
        db: Session,
        search: str | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[List[Member], int]:

        stmt = select(Member)

        if search:
            # wildcards typed by the admin are matched literally
            search_term = search.lower()
            stmt = stmt.where(
                or_(
                    func.lower(Member.full_name).contains(search_term, autoescape=True),
                    func.lower(Member.email).contains(search_term, autoescape=True),
                    func.lower(Member.member_number).contains(search_term, autoescape=True),
                    func.lower(Member.national_id).contains(search_term, autoescape=True),
                )
            )

        # total count (before pagination)
        total = db.execute(
            select(func.count()).select_from(stmt.subquery())
        ).scalar()

        # newest first; id breaks ties between same-second registrations
        stmt = (
            stmt.order_by(
                Member.registered_at.desc(),
                Member.id.desc(),
            )
            .offset((page - 1) * page_size)
            .limit(page_size)
        )

        members = db.execute(stmt).scalars().all()
        return members, total

    # -------------------------
    # LIST ACTIVE (public display)
    # -------------------------
    @staticmethod
    def list_active(
        db: Session,
        limit: int,
        order_by: str = "registered_at",
        descending: bool = True,
    ) -> List[Member]:
        column = getattr(Member, order_by)
        stmt = (
            select(Member)
            .where(Member.status == "active")
            .order_by(column.desc() if descending else column.asc(), Member.id.asc())
            .limit(limit)
        )
        return db.execute(stmt).scalars().all()

    # -------------------------
    # COUNT ACTIVE (stats)
    # -------------------------
    @staticmethod
    def count_active(db: Session, since: datetime | None = None) -> int:
        stmt = select(func.count(Member.id)).where(Member.status == "active")
        if since is not None:
            stmt = stmt.where(Member.registered_at >= since)
        return db.execute(stmt).scalar() or 0

    # -------------------------
    # DELETE (HARD)
    # -------------------------
    @staticmethod
    def delete(db: Session, member: Member) -> None:
        db.delete(member)

    @staticmethod
    def delete_many(db: Session, member_ids: Iterable[int]) -> int:
        result = db.execute(
            delete(Member)
            .where(Member.id.in_(list(member_ids)))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
