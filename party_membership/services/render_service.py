"""
HTML fragments for embedding membership features in public pages.

One template per surface; the display options arrive as ``yes``/``no``
strings the way site editors write them.
"""
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from party_membership.core.constants import (
    MSG_INVALID_EMAIL,
    MSG_INVALID_NATIONAL_ID,
    MSG_INVALID_PHONE,
    MSG_REQUIRED_FIELDS,
    NATIONAL_ID_PATTERN,
    PHONE_MIN_LENGTH,
)
from party_membership.db.models.member import Member
from party_membership.schemas.member import MembershipStats
from party_membership.services.member_service import MemberService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

# shared with the server-side validator so both sides agree
FORM_RULES = {
    "national_id_pattern": NATIONAL_ID_PATTERN.strip("^$"),
    "phone_min_length": PHONE_MIN_LENGTH,
    "messages": {
        "required": MSG_REQUIRED_FIELDS,
        "national_id": MSG_INVALID_NATIONAL_ID,
        "email": MSG_INVALID_EMAIL,
        "phone": MSG_INVALID_PHONE,
    },
}


def is_yes(value: str | None) -> bool:
    return (value or "").strip().lower() == "yes"


class RenderService:

    def __init__(self, members: MemberService, api_prefix: str = "/v1/membership"):
        self._members = members
        self._api_prefix = api_prefix

    def _short_date(self, member: Member) -> str:
        registered = self._members.to_local(member.registered_at)
        return f"{registered:%b} {registered.day}, {registered.year}"

    def membership_form(self, show_checker: str = "yes") -> str:
        return env.get_template("membership_form.html").render(
            rules=FORM_RULES,
            show_checker=is_yes(show_checker),
            register_url=f"{self._api_prefix}/register",
            check_url=f"{self._api_prefix}/check",
        )

    def membership_checker(self) -> str:
        return env.get_template("membership_checker.html").render(
            rules=FORM_RULES,
            check_url=f"{self._api_prefix}/check",
        )

    def members_list(
        self,
        limit: int = 10,
        show_email: str = "no",
        show_phone: str = "no",
        show_id: str = "no",
        orderby: str = "registered_at",
        order: str = "desc",
    ) -> str:
        members: List[Member] = self._members.list_public(limit, orderby, order)
        rows = [
            {
                "member_number": m.member_number,
                "full_name": m.full_name,
                "email": m.email,
                "phone": m.phone,
                "national_id": m.national_id,
                "registered": self._short_date(m),
            }
            for m in members
        ]
        return env.get_template("members_list.html").render(
            rows=rows,
            show_email=is_yes(show_email),
            show_phone=is_yes(show_phone),
            show_id=is_yes(show_id),
        )

    def membership_stats(
        self,
        show_total: str = "yes",
        show_today: str = "yes",
        show_this_month: str = "yes",
        show_this_year: str = "yes",
    ) -> str:
        stats: MembershipStats = self._members.get_stats(
            show_total=is_yes(show_total),
            show_today=is_yes(show_today),
            show_this_month=is_yes(show_this_month),
            show_this_year=is_yes(show_this_year),
        )
        return env.get_template("membership_stats.html").render(stats=stats)
