from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from party_membership.api.deps import get_render_service
from party_membership.services.render_service import RenderService

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/form")
def membership_form(
    show_checker: str = "yes",
    renderer: RenderService = Depends(get_render_service),
):
    return renderer.membership_form(show_checker=show_checker)


@router.get("/checker")
def membership_checker(renderer: RenderService = Depends(get_render_service)):
    return renderer.membership_checker()


@router.get("/members")
def members_list(
    limit: int = 10,
    show_email: str = "no",
    show_phone: str = "no",
    show_id: str = "no",
    orderby: str = "registered_at",
    order: str = "desc",
    renderer: RenderService = Depends(get_render_service),
):
    return renderer.members_list(
        limit=limit,
        show_email=show_email,
        show_phone=show_phone,
        show_id=show_id,
        orderby=orderby,
        order=order,
    )


@router.get("/stats")
def membership_stats(
    show_total: str = "yes",
    show_today: str = "yes",
    show_this_month: str = "yes",
    show_this_year: str = "yes",
    renderer: RenderService = Depends(get_render_service),
):
    return renderer.membership_stats(
        show_total=show_total,
        show_today=show_today,
        show_this_month=show_this_month,
        show_this_year=show_this_year,
    )
