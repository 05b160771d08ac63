import logging
from src.core.customization.defaults import initialize
from src.core.menu.models import Modifier, ModifierOption


def test_seeding_rules(size, sauce, extras, toppings):
    state = initialize([size, sauce, extras, toppings])
    assert state == {
        "size": {"small"},       # eerste optie van verplichte single
        "sauce": set(),          # optioneel, geen default
        "extras": set(),
        "toppings": {"a"},       # expliciete default
    }


def test_explicit_default_beats_first_option(size):
    size.options[2].is_default = True
    assert initialize([size])["size"] == {"large"}


def test_idempotent(size, sauce, extras, toppings):
    mods = [size, sauce, extras, toppings]
    assert initialize(mods) == initialize(mods)


def test_required_single_without_options_stays_empty():
    m = Modifier(id="m", name="m", type="single", required=True)
    assert initialize([m]) == {"m": set()}


def test_multiple_defaults_on_single_keeps_first(caplog):
    m = Modifier(id="m", name="m", type="single", options=[
        ModifierOption("x", "X", 0, True), ModifierOption("y", "Y", 0, True),
    ])
    with caplog.at_level(logging.WARNING):
        state = initialize([m])
    assert state == {"m": {"x"}}
    assert "single-select" in caplog.text


def test_defaults_capped_at_max(extras):
    for o in extras.options:
        o.is_default = True
    assert initialize([extras])["extras"] == {"a", "b"}
