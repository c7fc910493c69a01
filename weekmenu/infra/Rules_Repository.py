"""Generation rules singleton persisted under the 'generationRules' key."""
from weekmenu.domain.Rules import GenerationRules
from weekmenu.infra.Key_Value_Store import KeyValueStore
from weekmenu.utilities.constants import RULES_KEY


class RulesRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> GenerationRules:
        data = self.store.get(RULES_KEY)
        if not isinstance(data, dict):
            return GenerationRules()
        return GenerationRules.from_dict(data)

    def save(self, rules: GenerationRules) -> GenerationRules:
        rules = rules.normalized()
        self.store.put(RULES_KEY, rules.to_dict())
        return rules

    def reset(self) -> GenerationRules:
        return self.save(GenerationRules())

    def toggle_include(self, recipe_id: str) -> GenerationRules:
        return self.save(self.load().toggle_include(recipe_id))

    def toggle_exclude(self, recipe_id: str) -> GenerationRules:
        return self.save(self.load().toggle_exclude(recipe_id))
