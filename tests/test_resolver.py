from __future__ import annotations

import pytest

from pgn130316.config import load_mapping_table
from pgn130316.models.mapping import MappingRule
from pgn130316.resolver import render_path, resolve


def _rules(*rows: dict) -> tuple[MappingRule, ...]:
    return tuple(MappingRule.model_validate(row) for row in rows)


def test_default_table_sea_temperature() -> None:
    table = load_mapping_table({})

    mapping = resolve(table, 0, 2)

    assert mapping is not None
    assert mapping.path == "environment.water.2"
    assert mapping.leaf("temperature") == "environment.water.2.temperature"
    assert mapping.name == "Sea Temperature"
    assert mapping.source == 0
    assert mapping.instance == 2


def test_default_table_unknown_source_uses_wildcard() -> None:
    table = load_mapping_table({})

    mapping = resolve(table, 99, 5)

    assert mapping is not None
    assert mapping.path == "sensors.temperature.99.5"
    assert mapping.name is None
    assert mapping.source == 99


def test_symbolic_source_matches_rule_name() -> None:
    table = load_mapping_table({})

    mapping = resolve(table, "Engine Room Temperature", 1)

    assert mapping is not None
    assert mapping.path == "environment.inside.engineRoom.1"
    assert mapping.source == 3


def test_alternate_refrigeration_spelling_matches_second_code_7_rule() -> None:
    table = load_mapping_table({})

    mapping = resolve(table, "Refridgeration Temperature", 0)

    assert mapping is not None
    assert mapping.source == 7
    assert mapping.name == "Refridgeration Temperature"
    assert mapping.path == "environment.inside.refrigerator.0"


def test_numeric_code_7_picks_first_of_duplicate_rules() -> None:
    table = load_mapping_table({})

    mapping = resolve(table, 7, 0)

    assert mapping is not None
    assert mapping.name == "Refrigeration Temperature"


@pytest.mark.parametrize("source", [4, "4", 4.0, " 4 "])
def test_source_forms_compare_as_strings(source: object) -> None:
    table = _rules({"source": "4", "path": "cabin.${instance}"})

    mapping = resolve(table, source, 1)

    assert mapping is not None
    assert mapping.path == "cabin.1"


def test_exact_rule_before_wildcard_wins() -> None:
    table = _rules(
        {"source": 20, "path": "exact.${instance}"},
        {"source": "*", "path": "wild.${source}.${instance}"},
    )

    assert resolve(table, 20, 3).path == "exact.3"  # type: ignore[union-attr]
    assert resolve(table, 21, 3).path == "wild.21.3"  # type: ignore[union-attr]


def test_wildcard_before_exact_rule_shadows_it() -> None:
    table = _rules(
        {"source": "*", "path": "wild.${source}.${instance}"},
        {"source": 20, "path": "exact.${instance}"},
    )

    assert resolve(table, 20, 3).path == "wild.20.3"  # type: ignore[union-attr]


def test_no_match_without_wildcard() -> None:
    table = _rules(
        {"source": 0, "path": "environment.water.${instance}", "name": "Sea Temperature"},
        {"source": 1, "path": "environment.outside.${instance}"},
    )

    assert resolve(table, 42, 0) is None
    assert resolve(table, "Freezer Temperature", 0) is None


def test_empty_table_never_matches() -> None:
    assert resolve((), 0, 0) is None


def test_placeholders_replaced_everywhere() -> None:
    table = _rules(
        {
            "source": 12,
            "path": "x.${source}.${instance}.${name}.${source}.${instance}.${name}",
            "name": "hi",
        }
    )

    mapping = resolve(table, 12, 3)

    assert mapping is not None
    assert mapping.path == "x.12.3.hi.12.3.hi"


def test_missing_name_leaves_placeholder_literal() -> None:
    table = _rules({"source": 5, "path": "tanks.${name}.${instance}"})

    mapping = resolve(table, 5, 1)

    assert mapping is not None
    assert mapping.path == "tanks.${name}.1"


def test_render_path_substitution_order_is_source_instance_name() -> None:
    # Substituted text is not expanded again.
    assert render_path("a.${name}", source=1, instance=2, name="${source}") == "a.${source}"
    assert render_path("a.${source}.${instance}", source=1.0, instance=2, name=None) == "a.1.2"


@pytest.mark.parametrize(
    ("source", "instance"),
    [
        (None, 1),
        (7.5, 1),
        (99, "abc"),
        (99, None),
        (99, 2.7),
    ],
)
def test_unmappable_input_resolves_to_none(source: object, instance: object) -> None:
    table = load_mapping_table({})

    assert resolve(table, source, instance) is None


def test_substituted_source_is_not_expanded_again() -> None:
    table = _rules({"source": "*", "path": "sensors.${source}.${instance}"})

    mapping = resolve(table, "odd${instance}", 4)

    assert mapping is not None
    assert mapping.path == "sensors.odd${instance}.4"


def test_render_path_single_pass() -> None:
    assert render_path("${source}/${instance}", source="${instance}", instance=3, name=None) == "${instance}/3"
    assert render_path("${instance}.${name}", source=0, instance="${name}", name="n") == "${name}.n"
