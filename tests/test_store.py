import pytest

from starwars.models import MissingNameError
from starwars.store import SEED_CHARACTERS, CharacterStore


def test_seeded_with_three_characters_in_order(store):
    assert [c.routeName for c in store.list_all()] == ["yoda", "darthmaul", "obiwankenobi"]
    assert [c.to_json() for c in store.list_all()] == list(SEED_CHARACTERS)


def test_find_is_case_sensitive(store):
    assert store.find("yoda").name == "Yoda"
    assert store.find("Yoda") is None
    assert store.find("nonexistent") is None


def test_add_derives_route_name_and_appends(store, han_solo):
    before = [c.routeName for c in store.list_all()]
    created = store.add(han_solo)

    assert created.routeName == "hansolo"
    assert len(store) == len(before) + 1
    assert [c.routeName for c in store.list_all()] == before + ["hansolo"]
    assert store.find("hansolo") is created


def test_add_overwrites_supplied_route_name(store):
    created = store.add({"name": "Han Solo", "routeName": "captain"})
    assert created.routeName == "hansolo"
    assert store.find("captain") is None


def test_add_does_not_mutate_payload(store, han_solo):
    payload = dict(han_solo)
    store.add(payload)
    assert payload == han_solo


def test_duplicates_are_kept_and_first_wins(store):
    first = store.add({"name": "Han Solo", "role": "Smuggler"})
    store.add({"name": "han solo", "role": "General"})

    assert len(store) == 5
    assert store.find("hansolo") is first


@pytest.mark.parametrize("payload", [{}, {"role": "Smuggler"}, {"name": 7}])
def test_add_without_string_name_raises(store, payload):
    with pytest.raises(MissingNameError):
        store.add(payload)
    assert len(store) == 3


def test_stores_are_isolated():
    a, b = CharacterStore(), CharacterStore()
    a.add({"name": "Rey"})
    assert len(a) == 4
    assert len(b) == 3


def test_custom_seed():
    store = CharacterStore(seed=[{"routeName": "rey", "name": "Rey"}])
    assert [c.to_json() for c in store.list_all()] == [{"routeName": "rey", "name": "Rey"}]


def test_list_all_returns_a_copy(store):
    listing = store.list_all()
    listing.clear()
    assert len(store) == 3
