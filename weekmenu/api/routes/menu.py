import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from weekmenu.api.deps import get_menu_repository
from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.events.web_observers import get_events
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.pdf_utils import generate_pdf_for_menu
from weekmenu.logic.reporting.costs import summarize_menu_cost
from weekmenu.utilities.validators import DayAssignInput

router = APIRouter(prefix="/api/menu", tags=["menu"])
logger = logging.getLogger("weekmenu_app")


def menu_payload(menu: WeeklyMenu, menus: MenuRepository) -> dict:
    """Menu dict with each day's recipe name (None for unassigned or deleted recipes)."""
    names = {r.id: r.name for r in menus.recipes.list()}
    data = menu.to_dict()
    for day in data["days"]:
        day["recipeName"] = names.get(day["recipeId"]) if day["recipeId"] else None
    return data


@router.get("")
def get_menu(menus: MenuRepository = Depends(get_menu_repository)):
    return menu_payload(menus.get_working_menu(), menus)


@router.post("/new")
def new_menu(menus: MenuRepository = Depends(get_menu_repository)):
    return menu_payload(menus.new_week(), menus)


@router.post("/generate")
def generate_menu(menus: MenuRepository = Depends(get_menu_repository)):
    menu = menus.generate_week()
    logger.info(f"Menu {menu.id} generated ({len(menu.recipe_ids())} days assigned)")
    payload = menu_payload(menu, menus)
    payload["reveal_token"] = menus.scheduler.token if menus.scheduler else None
    return payload


@router.post("/days/{index}/lock")
def toggle_lock(index: int = Path(..., ge=0, le=6), menus: MenuRepository = Depends(get_menu_repository)):
    return menu_payload(menus.toggle_lock(index), menus)


@router.put("/days/{index}")
def assign_day(payload: DayAssignInput, index: int = Path(..., ge=0, le=6),
               menus: MenuRepository = Depends(get_menu_repository)):
    try:
        menu = menus.assign_day(index, payload.recipeId)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return menu_payload(menu, menus)


@router.post("/days/{index}/regenerate")
def regenerate_day(index: int = Path(..., ge=0, le=6), menus: MenuRepository = Depends(get_menu_repository)):
    return menu_payload(menus.regenerate_day(index), menus)


@router.get("/shopping-list")
def shopping_list(menus: MenuRepository = Depends(get_menu_repository)):
    menu = menus.get_working_menu()
    items = menus.shopping_list(menu)
    return {
        "menu_id": menu.id,
        "servings": menu.rules.servings,
        "items": [i.to_dict() for i in items],
        "count": len(items),
        "total_cost": sum(i.cost for i in items),
    }


@router.get("/summary")
def menu_summary(menus: MenuRepository = Depends(get_menu_repository)):
    menu = menus.get_working_menu()
    return summarize_menu_cost(menu, menus.recipes.list())


@router.get("/events")
def menu_events(since: Optional[int] = Query(default=None)):
    return get_events(since)


@router.get("/export_pdf")
def export_pdf(menus: MenuRepository = Depends(get_menu_repository)):
    menu = menus.get_working_menu()
    pdf_bytes = generate_pdf_for_menu(menu, menus.recipes.list(), menus.shopping_list(menu))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=weekly_menu_{menu.week_start}.pdf"},
    )
