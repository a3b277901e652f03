"""Tests for roost.maps.access — get and get_in."""

import copy
import pickle
from collections import Counter, defaultdict

from roost.maps import ABSENT, Node, get, get_in, is_absent

PEOPLE = Node(
    {
        "braden": {
            "name": "Braden",
            "age": 22,
            "pets": {
                "cats": {"dana": {"age": 3, "color": "black"}, "luke": {"age": 1, "color": "grey"}},
                "fish": {"jorge": {"species": "molly", "color": "white"}},
            },
        },
        "anne": {"name": "Anne", "age": 54, "nickname": None},
    }
)


class TestAbsent:
    def test_falsy(self) -> None:
        assert not ABSENT

    def test_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"

    def test_distinct_from_none(self) -> None:
        assert ABSENT is not None
        assert is_absent(ABSENT)
        assert not is_absent(None)

    def test_singleton_survives_pickle_and_copy(self) -> None:
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT
        assert copy.copy(ABSENT) is ABSENT
        assert copy.deepcopy(ABSENT) is ABSENT
        assert type(ABSENT)() is ABSENT


class TestGet:
    def test_present(self) -> None:
        assert get(PEOPLE["braden"], "age") == 22

    def test_missing_returns_absent(self) -> None:
        assert get(PEOPLE, "carl") is ABSENT

    def test_missing_with_default(self) -> None:
        assert get(PEOPLE, "carl", None) is None

    def test_stored_none_is_not_absent(self) -> None:
        assert get(PEOPLE["anne"], "nickname") is None

    def test_plain_dict(self) -> None:
        assert get({"a": 1}, "a") == 1

    def test_non_mapping_returns_default(self) -> None:
        assert get(42, "a") is ABSENT
        assert get(None, "a", "fallback") == "fallback"

    def test_unhashable_key_is_missing(self) -> None:
        assert get(PEOPLE, ["braden"]) is ABSENT

    def test_counter_missing_key_is_absent(self) -> None:
        assert get(Counter(), "x") is ABSENT
        assert get(Counter(x=2), "x") == 2

    def test_defaultdict_is_not_modified(self) -> None:
        source: defaultdict[str, dict] = defaultdict(dict)
        assert get(source, "missing") is ABSENT
        assert dict(source) == {}


class TestGetIn:
    def test_deep_value(self) -> None:
        assert get_in(PEOPLE, ["braden", "pets", "fish", "jorge", "species"]) == "molly"

    def test_any_iterable_path(self) -> None:
        assert get_in(PEOPLE, ("braden", "age")) == 22
        assert get_in(PEOPLE, iter(["anne", "name"])) == "Anne"

    def test_empty_path_returns_root(self) -> None:
        assert get_in(PEOPLE, []) is PEOPLE

    def test_missing_intermediate(self) -> None:
        assert get_in(PEOPLE, ["carl", "pets", "cats"]) is ABSENT

    def test_missing_leaf(self) -> None:
        assert get_in(PEOPLE, ["braden", "pets", "birds"]) is ABSENT

    def test_scalar_in_the_middle(self) -> None:
        assert get_in(PEOPLE, ["braden", "age", "years"]) is ABSENT

    def test_none_in_the_middle(self) -> None:
        assert get_in(PEOPLE, ["anne", "nickname", "first"]) is ABSENT

    def test_default(self) -> None:
        assert get_in(PEOPLE, ["carl", "age"], 0) == 0

    def test_defaultdict_intermediates_not_created(self) -> None:
        source: defaultdict[str, defaultdict] = defaultdict(lambda: defaultdict(dict))
        assert get_in(source, ["a", "b", "c"]) is ABSENT
        assert dict(source) == {}

    def test_counter_leaf(self) -> None:
        assert get_in({"tally": Counter(a=1)}, ["tally", "b"]) is ABSENT
        assert get_in({"tally": Counter(a=1)}, ["tally", "a"]) == 1

    def test_plain_nested_dicts(self) -> None:
        assert get_in({"a": {"b": {"c": 1}}}, ["a", "b", "c"]) == 1
