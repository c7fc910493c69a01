"""FastAPI dependencies: the persistence store and the repositories built on it.

Tests swap the store with app.dependency_overrides[get_store].
"""
from functools import lru_cache

from fastapi import Depends

from weekmenu.infra.Key_Value_Store import JsonFileStore, KeyValueStore
from weekmenu.infra.History_Repository import HistoryRepository
from weekmenu.infra.Menu_Repository import MenuRepository
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.infra.Rules_Repository import RulesRepository
from weekmenu.infra.Sample_Week_Repository import SampleWeekRepository
from weekmenu.logic.generation.reveal import RevealScheduler
from weekmenu.utilities.config import DATA_DIR


@lru_cache(maxsize=1)
def get_store() -> KeyValueStore:
    return JsonFileStore(DATA_DIR)


@lru_cache(maxsize=1)
def get_scheduler() -> RevealScheduler:
    return RevealScheduler()


def get_recipe_repository(store: KeyValueStore = Depends(get_store)) -> RecipeRepository:
    return RecipeRepository(store)


def get_rules_repository(store: KeyValueStore = Depends(get_store)) -> RulesRepository:
    return RulesRepository(store)


def get_sample_week_repository(store: KeyValueStore = Depends(get_store)) -> SampleWeekRepository:
    return SampleWeekRepository(store)


def get_history_repository(store: KeyValueStore = Depends(get_store)) -> HistoryRepository:
    return HistoryRepository(store)


def get_menu_repository(store: KeyValueStore = Depends(get_store),
                        scheduler: RevealScheduler = Depends(get_scheduler)) -> MenuRepository:
    return MenuRepository(store, scheduler=scheduler)
