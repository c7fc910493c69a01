from fastapi import APIRouter, Depends

from weekmenu.api.deps import get_rules_repository
from weekmenu.domain.Rules import GenerationRules
from weekmenu.infra.Rules_Repository import RulesRepository
from weekmenu.utilities.validators import RulesInput

router = APIRouter(prefix="/api/rules", tags=["rules"])


@router.get("")
def get_rules(repo: RulesRepository = Depends(get_rules_repository)):
    return repo.load().to_dict()


@router.put("")
def update_rules(payload: RulesInput, repo: RulesRepository = Depends(get_rules_repository)):
    # An id sent in both lists is stored as excluded only
    return repo.save(GenerationRules.from_dict(payload.model_dump())).to_dict()


@router.post("/reset")
def reset_rules(repo: RulesRepository = Depends(get_rules_repository)):
    return repo.reset().to_dict()


@router.post("/include/{recipe_id}")
def toggle_include(recipe_id: str, repo: RulesRepository = Depends(get_rules_repository)):
    return repo.toggle_include(recipe_id).to_dict()


@router.post("/exclude/{recipe_id}")
def toggle_exclude(recipe_id: str, repo: RulesRepository = Depends(get_rules_repository)):
    return repo.toggle_exclude(recipe_id).to_dict()
