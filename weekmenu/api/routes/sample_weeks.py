from fastapi import APIRouter, Depends, HTTPException

from weekmenu.api.deps import get_menu_repository, get_sample_week_repository
from weekmenu.domain.SampleWeek import SampleWeek
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Sample_Week_Repository import SampleWeekRepository
from weekmenu.utilities.validators import SampleFromMenuInput, SampleWeekInput

router = APIRouter(prefix="/api/sample-weeks", tags=["sample-weeks"])


@router.get("")
def list_sample_weeks(repo: SampleWeekRepository = Depends(get_sample_week_repository)):
    samples = repo.list()
    return {"items": [s.to_dict() for s in samples], "count": len(samples)}


@router.post("", status_code=201)
def add_sample_week(payload: SampleWeekInput, repo: SampleWeekRepository = Depends(get_sample_week_repository)):
    return repo.add(SampleWeek(name=payload.name, recipe_ids=payload.recipeIds)).to_dict()


@router.post("/from-menu", status_code=201)
def add_sample_from_menu(payload: SampleFromMenuInput, menus: MenuRepository = Depends(get_menu_repository)):
    """Save the working week as a sample week; every day must have a recipe."""
    menu = menus.get_working_menu()
    try:
        sample = menus.samples.add(SampleWeek(name=payload.name, recipe_ids=menu.recipe_ids()))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return sample.to_dict()


@router.delete("/{sample_id}")
def delete_sample_week(sample_id: str, repo: SampleWeekRepository = Depends(get_sample_week_repository)):
    if not repo.delete(sample_id):
        raise HTTPException(status_code=404, detail="Sample week not found")
    return {"deleted": sample_id}
