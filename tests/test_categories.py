import pytest

from placefinder.categories import (
    CATEGORIES,
    RESOLUTION_ORDER,
    get_category,
    infer_mode,
    resolve_category,
)


@pytest.mark.parametrize(
    "tokens,expected",
    [
        (["post_office"], "print_ship"),
        (["post_office", "bank"], "print_ship_and_others"),
        (["grocery_store", "supermarket"], "groceries"),
        (["supermarket", "grocery_store"], "groceries"),
        (["grocery_store"], "default"),
        (["grocery_store", "supermarket", "market"], "specialty_markets"),
        (["asian_grocery_store"], "specialty_markets"),
        (["butcher_shop", "pharmacy"], "specialty_markets"),
        (["drugstore"], "pharmacy"),
        (["pharmacy", "gas_station"], "pharmacy"),
        (["electric_vehicle_charging_station"], "gas_ev"),
        (["ev_charging_station"], "gas_ev"),
        (["atm"], "bank_atm"),
        (["clothing_store"], "clothing"),
        (["clothing_store", "shoe_store"], "default"),
        (["jewelry_store"], "jewelry"),
        (["jewelry_and_accessories"], "jewelry"),
        (["jewelry_store", "jewelry_and_accessories"], "default"),
        (["wine_bar"], "bar"),
        (["bar", "liquor_store"], "bar"),
        (["liquor_store"], "liquor"),
        (["wholesale_store"], "warehouse_clubs"),
        (["museum"], "attractions"),
        (["historical_landmark"], "attractions"),
        (["art_gallery"], "arts_culture"),
        (["golf_course"], "sports"),
        (["thrift_store"], "discount_thrift"),
        (["restaurant"], "default"),
        ([], "default"),
    ],
)
def test_resolve_category(tokens, expected):
    assert resolve_category(tokens) == expected


def test_post_office_outranks_everything():
    assert resolve_category(["bank", "pharmacy", "post_office"]) == "print_ship_and_others"


def test_every_resolved_key_is_registered():
    keys = {key for _, key in RESOLUTION_ORDER}
    assert keys <= set(CATEGORIES)
    assert "default" in CATEGORIES
    for key, category in CATEGORIES.items():
        assert category.key == key


def test_only_bar_preserves_order():
    assert [k for k, c in CATEGORIES.items() if c.preserve_order] == ["bar"]
    assert get_category(["pub"]).needs_origin


@pytest.mark.parametrize(
    "tokens,expected",
    [
        (["grocery_store", "supermarket"], "groceries"),
        (["market"], "specialty_markets"),
        (["food_store", "bank"], "specialty_markets"),
        (["bank"], "generic"),
        (["grocery_store"], "generic"),
    ],
)
def test_infer_mode(tokens, expected):
    assert infer_mode(tokens) == expected
