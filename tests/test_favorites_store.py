"""
Tests for the saved-recipes store and its key-value file backend
"""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from exceptions import StorageError
from models.recipe import Recipe
from storage.favorites_store import SAVED_RECIPES_KEY, FavoritesStore
from storage.local_storage import LocalStorage


def make_recipe(recipe_id="42", **overrides):
    data = {
        "id": recipe_id,
        "title": f"Recipe {recipe_id}",
        "image": "",
        "ingredients": ["1 cup rice", "2 cups water"],
        "instructions": ["Rinse rice.", "Simmer 18 minutes."],
        "ready_in_minutes": 20,
        "servings": 2,
        "calories": 410.0,
        "summary": "<p>Plain rice.</p>",
    }
    data.update(overrides)
    return Recipe(**data)


class BrokenBackend:
    """Persistence medium that fails every call"""

    def get_string(self, key):
        raise StorageError(key, "disk unavailable")

    def set_string(self, key, value):
        raise StorageError(key, "disk unavailable")

    def remove(self, key):
        raise StorageError(key, "disk unavailable")


class TestLocalStorage:

    def test_missing_key_is_none(self, local_storage):
        assert local_storage.get_string("nothing") is None
        assert not local_storage.contains_key("nothing")

    def test_values_persist_across_instances(self, tmp_path):
        LocalStorage(str(tmp_path)).set_string("k", "v")

        assert LocalStorage(str(tmp_path)).get_string("k") == "v"

    def test_remove(self, local_storage):
        local_storage.set_string("k", "v")
        local_storage.remove("k")
        local_storage.remove("k")

        assert local_storage.get_string("k") is None

    def test_corrupt_file_raises_storage_error(self, local_storage):
        local_storage.preferences_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError):
            local_storage.get_string("k")


class TestSaveAndRemove:

    def test_empty_when_nothing_stored(self, favorites):
        assert favorites.get_all() == []
        assert favorites.is_saved("42") is False

    def test_save_then_remove(self, favorites):
        favorites.save(make_recipe("42"))
        assert favorites.is_saved("42") is True

        favorites.remove("42")
        assert favorites.is_saved("42") is False

    def test_save_does_not_mutate_input(self, favorites):
        recipe = make_recipe("42")
        stored = favorites.save(recipe)

        assert recipe.is_saved is False
        assert stored.is_saved is True
        assert stored is not recipe

    def test_save_dedupes_by_id(self, favorites):
        favorites.save(make_recipe("42", title="First"))
        favorites.save(make_recipe("7"))
        favorites.save(make_recipe("42", title="Second"))

        saved = favorites.get_all()
        assert [r.id for r in saved] == ["42", "7"]
        assert saved[0].title == "Second"

    def test_remove_is_idempotent(self, favorites, local_storage):
        favorites.save(make_recipe("1"))
        favorites.save(make_recipe("2"))

        favorites.remove("1")
        once = local_storage.get_string(SAVED_RECIPES_KEY)
        favorites.remove("1")
        twice = local_storage.get_string(SAVED_RECIPES_KEY)

        assert once == twice
        assert [r.id for r in favorites.get_all()] == ["2"]

    def test_remove_unknown_id_is_noop(self, favorites):
        favorites.remove("never-saved")

        assert favorites.get_all() == []

    def test_remove_drops_legacy_duplicates(self, favorites, local_storage):
        entry = make_recipe("42").to_storage()
        local_storage.set_string(SAVED_RECIPES_KEY, json.dumps([entry, entry]))

        favorites.remove("42")

        assert favorites.get_all() == []

    def test_clear_deletes_key(self, favorites, local_storage):
        favorites.save(make_recipe("1"))
        favorites.clear()

        assert not local_storage.contains_key(SAVED_RECIPES_KEY)
        assert favorites.get_all() == []


class TestPersistenceFormat:

    def test_round_trip(self, favorites):
        original = make_recipe("42")
        favorites.save(original)

        reloaded = favorites.get_all()[0]
        for field in ("id", "title", "ingredients", "instructions", "ready_in_minutes", "servings", "calories", "summary"):
            assert getattr(reloaded, field) == getattr(original, field)
        assert reloaded.is_saved is True

    def test_persisted_field_names(self, favorites, local_storage):
        favorites.save(make_recipe("42"))

        entries = json.loads(local_storage.get_string(SAVED_RECIPES_KEY))
        assert set(entries[0]) == {
            "id", "title", "image", "ingredients", "instructions",
            "readyInMinutes", "servings", "calories", "summary", "isSaved",
        }
        assert entries[0]["isSaved"] is True

    def test_survives_new_store_instance(self, tmp_path):
        FavoritesStore(LocalStorage(str(tmp_path))).save(make_recipe("42"))

        assert FavoritesStore(LocalStorage(str(tmp_path))).is_saved("42")

    def test_malformed_entries_are_skipped(self, favorites, local_storage):
        good = make_recipe("1").to_storage()
        local_storage.set_string(SAVED_RECIPES_KEY, json.dumps([good, {"id": "2"}, "junk"]))

        assert [r.id for r in favorites.get_all()] == ["1"]

    @pytest.mark.parametrize("raw", ["{broken", json.dumps({"id": "1"})])
    def test_unreadable_payload_raises(self, favorites, local_storage, raw):
        local_storage.set_string(SAVED_RECIPES_KEY, raw)

        with pytest.raises(StorageError):
            favorites.get_all()

    def test_backend_failure_propagates(self):
        store = FavoritesStore(BrokenBackend())

        with pytest.raises(StorageError):
            store.save(make_recipe("1"))

    def test_lone_surrogate_text_round_trips(self, favorites):
        favorites.save(make_recipe("bad", title="Bad \ud800 Soup", ingredients=["1 \udfff leek"]))

        reloaded = favorites.get_all()[0]
        assert reloaded.title == "Bad \ud800 Soup"
        assert reloaded.ingredients == ["1 \udfff leek"]

    def test_non_ascii_text_round_trips(self, favorites):
        favorites.save(make_recipe("crepe", title="Crêpes à l'orange 🍊"))

        assert favorites.get_all()[0].title == "Crêpes à l'orange 🍊"


class TestConcurrentWrites:

    def test_parallel_saves_are_not_lost(self, favorites):
        count = 40
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: favorites.save(make_recipe(str(i))), range(count)))

        saved = favorites.get_all()
        assert len(saved) == count
        assert {r.id for r in saved} == {str(i) for i in range(count)}

    def test_parallel_save_and_remove(self, favorites):
        for i in range(20):
            favorites.save(make_recipe(f"old-{i}"))

        def work(i):
            favorites.save(make_recipe(f"new-{i}"))
            favorites.remove(f"old-{i}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(20)))

        assert {r.id for r in favorites.get_all()} == {f"new-{i}" for i in range(20)}
