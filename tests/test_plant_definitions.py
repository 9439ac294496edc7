import pytest

from bytebloom.plant import LifeCycleStage
from bytebloom.plant_definitions import DEFINITIONS, PLANTS, PlantDefinition, find_plant


def test_one_template_per_definition_in_order():
    built = [PlantDefinition(d.name, d.seed).build().species for d in DEFINITIONS]
    assert built == [p.species for p in PLANTS]
    assert built == [d.name for d in DEFINITIONS]
    assert [find_plant(name).species for name in built] == built


def test_catalogue_starts_with_source_entries():
    assert DEFINITIONS[0] == PlantDefinition("Crimson Bloom", 12345)
    assert DEFINITIONS[-1] == PlantDefinition("Freedom's Foxglove", 60008)


def test_build_is_deterministic():
    definition = PlantDefinition("Crimson Bloom", 12345)
    first = definition.build()
    second = definition.build()
    assert first is not second
    assert first == second == PLANTS[0]
    reseeded = PlantDefinition("Crimson Bloom", 54321).build()
    assert reseeded.genetics != first.genetics


def test_build_matches_catalogue():
    assert PlantDefinition("Azure Fern", 54321).build() == find_plant("Azure Fern")


@pytest.mark.parametrize("definition", DEFINITIONS, ids=lambda d: d.name)
def test_generated_traits_within_ranges(definition):
    plant = PlantDefinition(definition.name, definition.seed).build()
    g = plant.genetics
    assert plant.species == definition.name
    assert 5 <= g.growth_time < 15
    assert 1 <= g.yield_range[0] < 5
    assert 5 <= g.yield_range[1] < 10
    assert 0.3 <= g.ideal_moisture_range[0] < 0.5
    assert 0.5 <= g.ideal_moisture_range[1] < 0.7
    assert all(0.05 <= c < 0.15 for c in g.nutrient_consumption)
    assert 4.0 <= g.light_req < 6.0
    assert 0.05 <= g.pest_resistance < 0.15
    assert 0.05 <= g.disease_resistance < 0.15
    assert 0.85 <= g.genetic_stability < 0.95
    assert 8 <= plant.maturity_age < 12
    assert 13 <= plant.wither_time < 18
    assert plant.maturity_age < plant.wither_time


@pytest.mark.parametrize("definition", DEFINITIONS, ids=lambda d: d.name)
def test_templates_start_fresh(definition):
    plant = PlantDefinition(definition.name, definition.seed).build()
    assert plant.life_cycle_stage is LifeCycleStage.SEED
    assert plant.age == 0
    assert plant.growth_progress == 0.0
    assert plant.health == 1.0


def test_find_plant_by_name():
    assert find_plant("Ghost Orchid").species == "Ghost Orchid"


def test_find_plant_unknown_is_none():
    assert find_plant("tomato") is None


def test_find_plant_returns_first_match():
    for definition in DEFINITIONS:
        first = next(p for p in PLANTS if p.species == definition.name)
        assert find_plant(definition.name) is first