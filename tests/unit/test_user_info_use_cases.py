"""
Unit tests for the body-metrics use cases.

Covers payload validation, history/latest bookkeeping, entry corrections and
the migration of profiles saved before the history existed.
"""

import re

import pytest

from application.exceptions import HistoryEntryNotFoundError, ValidationError
from application.use_cases import (
    CorrectUserInfoEntryUseCase,
    GetUserInfoUseCase,
    ListUserInfoHistoryUseCase,
    SaveUserInfoUseCase,
)
from infrastructure.db import KVUserInfoRepository

from tests.fakes import TEST_USER_ID, FakeClock, FakeKeyValueStore

pytestmark = pytest.mark.unit

LEGACY_PROFILE = {
    "weight": 82,
    "height": 180,
    "age": 29.6,
    "bodyFat": 18,
    "updatedAt": "2025-12-01T10:00:00.000Z",
}


@pytest.fixture
def store():
    return FakeKeyValueStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo(store):
    return KVUserInfoRepository(store)


@pytest.fixture
def save(repo, clock):
    return SaveUserInfoUseCase(repo, clock)


class TestSaveUserInfo:
    def test_writes_history_entry_and_latest(self, save, repo):
        result = save.execute(TEST_USER_ID, {"weight": "80.5", "height": 180, "age": 30})

        assert re.fullmatch(r"1772442000000_[0-9a-f]{8}", result.entry.entry_id)
        assert result.entry.recorded_at == "2026-03-02T09:00:00.000Z"
        assert result.entry.body_fat is None

        [entry] = repo.list_history(TEST_USER_ID)
        assert entry == result.entry
        assert repo.get_latest(TEST_USER_ID) == {
            "weight": 80.5,
            "height": 180,
            "age": 30,
            "bodyFat": None,
            "updatedAt": "2026-03-02T09:00:00.000Z",
        }

    def test_age_rounded(self, save):
        assert save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30.5}).entry.age == 31

    @pytest.mark.parametrize("payload,message", [
        ({"height": 180, "age": 30}, "Invalid weight"),
        ({"weight": 0, "height": 180, "age": 30}, "Invalid weight"),
        ({"weight": 80, "height": "tall", "age": 30}, "Invalid height"),
        ({"weight": 80, "height": 180, "age": -1}, "Invalid age"),
        ({"weight": 80, "height": 180, "age": 30, "bodyFat": 101}, "Invalid body fat percentage"),
    ])
    def test_invalid_payloads(self, save, repo, payload, message):
        with pytest.raises(ValidationError, match=message):
            save.execute(TEST_USER_ID, payload)
        assert repo.list_history(TEST_USER_ID) == []

    def test_empty_body_fat_is_absent(self, save):
        result = save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30, "bodyFat": ""})
        assert result.entry.body_fat is None

    def test_each_save_adds_an_entry(self, save, repo, clock):
        save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30})
        clock.advance(days=7)
        save.execute(TEST_USER_ID, {"weight": 79, "height": 180, "age": 30})

        assert [e.weight for e in repo.list_history(TEST_USER_ID)] == [79, 80]
        assert repo.get_latest(TEST_USER_ID)["weight"] == 79

    def test_legacy_profile_migrated_before_new_entry(self, save, store, repo):
        store.seed({"user_info_user-123": LEGACY_PROFILE})

        save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30})

        history = repo.list_history(TEST_USER_ID)
        assert [e.weight for e in history] == [80, 82]
        assert history[1].entry_id == "legacy_1772442000000"
        assert history[1].recorded_at == "2025-12-01T10:00:00.000Z"


class TestGetUserInfo:
    def test_none_for_new_user(self, repo, clock):
        assert GetUserInfoUseCase(repo, clock).execute(TEST_USER_ID) is None

    def test_returns_cached_profile_as_stored(self, store, repo, clock):
        store.seed({"user_info_user-123": LEGACY_PROFILE})
        assert GetUserInfoUseCase(repo, clock).execute(TEST_USER_ID) == LEGACY_PROFILE

    def test_rebuilds_cache_from_history(self, save, store, repo, clock):
        save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30})
        store.delete("user_info_user-123")

        profile = GetUserInfoUseCase(repo, clock).execute(TEST_USER_ID)

        assert profile["weight"] == 80
        assert store.get("user_info_user-123") == profile


class TestListUserInfoHistory:
    def test_migrates_legacy_profile(self, store, repo, clock):
        store.seed({"user_info_user-123": LEGACY_PROFILE})

        [entry] = ListUserInfoHistoryUseCase(repo, clock).execute(TEST_USER_ID)

        assert entry.entry_id == "legacy_1772442000000"
        assert entry.age == 30
        assert entry.body_fat == 18
        assert store.keys("user_info_history:") == ["user_info_history:user-123:legacy_1772442000000"]

    def test_invalid_legacy_profile_migrates_nothing(self, store, repo, clock):
        store.seed({"user_info_user-123": {"weight": -3, "height": 180, "age": 30}})

        assert ListUserInfoHistoryUseCase(repo, clock).execute(TEST_USER_ID) == []
        assert store.keys("user_info_history:") == []

    def test_unreadable_rows_skipped(self, save, store, repo, clock):
        save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30})
        store.seed({"user_info_history:user-123:broken": {"entryId": "broken", "weight": "heavy"}})

        assert len(ListUserInfoHistoryUseCase(repo, clock).execute(TEST_USER_ID)) == 1


class TestCorrectUserInfoEntry:
    def test_correction_keeps_identity_and_bumps_updated_at(self, save, repo, clock):
        original = save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30}).entry
        clock.advance(hours=1)

        updated = CorrectUserInfoEntryUseCase(repo, clock).execute(
            TEST_USER_ID, original.entry_id, {"weight": 78, "height": 180, "age": 30}
        )

        assert updated.entry_id == original.entry_id
        assert updated.recorded_at == original.recorded_at
        assert updated.updated_at == "2026-03-02T10:00:00.000Z"
        assert [e.weight for e in repo.list_history(TEST_USER_ID)] == [78]
        assert repo.get_latest(TEST_USER_ID)["weight"] == 78

    def test_correcting_older_entry_keeps_newest_as_latest(self, save, repo, clock):
        older = save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30}).entry
        clock.advance(days=1)
        save.execute(TEST_USER_ID, {"weight": 79, "height": 180, "age": 30})

        CorrectUserInfoEntryUseCase(repo, clock).execute(
            TEST_USER_ID, older.entry_id, {"weight": 81, "height": 180, "age": 30}
        )

        assert repo.get_latest(TEST_USER_ID)["weight"] == 79

    def test_missing_entry(self, repo, clock):
        with pytest.raises(HistoryEntryNotFoundError):
            CorrectUserInfoEntryUseCase(repo, clock).execute(
                TEST_USER_ID, "missing", {"weight": 80, "height": 180, "age": 30}
            )

    def test_invalid_values_rejected(self, save, repo, clock):
        entry = save.execute(TEST_USER_ID, {"weight": 80, "height": 180, "age": 30}).entry
        with pytest.raises(ValidationError, match="Invalid height"):
            CorrectUserInfoEntryUseCase(repo, clock).execute(
                TEST_USER_ID, entry.entry_id, {"weight": 80, "height": 0, "age": 30}
            )
