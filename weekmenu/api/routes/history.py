from fastapi import APIRouter, Depends, HTTPException

from weekmenu.api.deps import get_menu_repository
from weekmenu.infra.Menu_Repository import MenuRepository

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
def list_history(menus: MenuRepository = Depends(get_menu_repository)):
    history = menus.history.list()
    return {"items": [m.to_dict() for m in history], "count": len(history)}


@router.get("/{menu_id}/shopping-list")
def history_shopping_list(menu_id: str, menus: MenuRepository = Depends(get_menu_repository)):
    menu = menus.history.get(menu_id)
    if menu is None:
        raise HTTPException(status_code=404, detail="Menu not found in history")
    items = menus.shopping_list(menu)
    return {"menu_id": menu_id, "items": [i.to_dict() for i in items], "count": len(items)}


@router.delete("")
def clear_history(menus: MenuRepository = Depends(get_menu_repository)):
    menus.history.clear()
    return {"cleared": True}
