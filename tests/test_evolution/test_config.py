import pytest

from ifsevo.evolution.config import DEFAULT_CONFIG, PRESETS, EvolutionConfig, get_preset
from ifsevo.evolution.operators import CrossoverType, MutationType
from ifsevo.utils.validation import ValidationError


def test_default_config_values():
    cfg = EvolutionConfig()
    assert cfg == DEFAULT_CONFIG
    assert cfg.population_size == 16
    assert cfg.mutation_rate == 0.8
    assert cfg.crossover_rate == 0.6
    assert cfg.mutation_strength == 0.12
    assert cfg.mutation_type is MutationType.STRUCTURED
    assert cfg.crossover_type is CrossoverType.BLEND
    assert cfg.elite_count == 2
    assert cfg.random_injection == 1
    assert cfg.tournament_size == 3
    assert cfg.enforce_contractivity is True
    assert cfg.allow_structural_mutation is True
    assert cfg.structural_mutation_rate == 0.08


def test_string_tags_are_parsed_into_enums():
    cfg = EvolutionConfig(mutation_type="color", crossover_type="single-point")
    assert cfg.mutation_type is MutationType.COLOR
    assert cfg.crossover_type is CrossoverType.SINGLE_POINT


@pytest.mark.parametrize(
    "field, value",
    [
        ("population_size", 0),
        ("population_size", -4),
        ("population_size", 2.5),
        ("mutation_rate", 1.1),
        ("crossover_rate", -0.1),
        ("mutation_strength", 0.0),
        ("mutation_strength", 1.01),
        ("elite_count", -1),
        ("random_injection", -1),
        ("tournament_size", 0),
        ("structural_mutation_rate", 2.0),
        ("enforce_contractivity", "yes"),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError) as exc:
        EvolutionConfig(**{field: value})
    assert exc.value.code == "invalid_config"
    assert exc.value.context["field"] == field


def test_unknown_operator_tags_are_rejected():
    with pytest.raises(ValidationError):
        EvolutionConfig(mutation_type="melt")
    with pytest.raises(ValidationError):
        EvolutionConfig(crossover_type="two-point")


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValidationError) as exc:
        EvolutionConfig.from_dict({"population_size": 8, "populationSize": 8})
    assert exc.value.code == "unknown_config_key"
    assert exc.value.context["keys"] == ["populationSize"]


def test_replace_and_to_dict():
    cfg = DEFAULT_CONFIG.replace(population_size=32, mutation_type="rotation")
    assert cfg.population_size == 32
    assert cfg.mutation_type is MutationType.ROTATION
    assert DEFAULT_CONFIG.population_size == 16

    data = cfg.to_dict()
    assert data["mutation_type"] == "rotation"
    assert data["crossover_type"] == "blend"
    assert EvolutionConfig.from_dict(data) == cfg

    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.replace(tournament_size=0)


def test_presets():
    assert set(PRESETS) == {"conservative", "exploratory", "balanced", "colorFocused", "structural"}
    assert get_preset("balanced") == DEFAULT_CONFIG

    conservative = get_preset("conservative")
    assert conservative.elite_count == 4
    assert conservative.allow_structural_mutation is False

    exploratory = get_preset("exploratory")
    assert exploratory.mutation_type is MutationType.RANDOM
    assert exploratory.crossover_type is CrossoverType.PARAMETER
    assert exploratory.random_injection == 3

    assert get_preset("colorFocused").mutation_type is MutationType.COLOR
    assert get_preset("structural").crossover_type is CrossoverType.SINGLE_POINT

    with pytest.raises(ValidationError) as exc:
        get_preset("chaotic")
    assert exc.value.code == "unknown_preset"
