import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError
from sqlmodel import create_engine

from video_insights.analyzer.exceptions import StorageError
from video_insights.config import settings
from video_insights.preferences import API_KEY_PREF, MODEL_PREF, Preferences
from video_insights.storage import DatabasePreferenceStore, MemoryPreferenceStore, Preference, get_session, reset_engine


class TestPreferences(unittest.TestCase):
    def test_unset_key_is_empty(self):
        prefs = Preferences(MemoryPreferenceStore())
        self.assertEqual(prefs.get_key(), "")

    def test_unset_model_uses_default(self):
        prefs = Preferences(MemoryPreferenceStore())
        self.assertEqual(prefs.get_model(), "gemini-1.5-pro")

    def test_default_model_override(self):
        prefs = Preferences(MemoryPreferenceStore(), default_model="gemini-1.5-flash")
        self.assertEqual(prefs.get_model(), "gemini-1.5-flash")

    def test_set_and_get(self):
        store = MemoryPreferenceStore()
        prefs = Preferences(store)
        prefs.set_key("secret-key")
        prefs.set_model("gemini-1.5-flash")

        self.assertEqual(prefs.get_key(), "secret-key")
        self.assertEqual(prefs.get_model(), "gemini-1.5-flash")
        self.assertEqual(store.get(API_KEY_PREF), "secret-key")
        self.assertEqual(store.get(MODEL_PREF), "gemini-1.5-flash")

    def test_stale_model_is_kept(self):
        prefs = Preferences(MemoryPreferenceStore({MODEL_PREF: "gemini-0.9-retired"}))
        self.assertEqual(prefs.get_model(), "gemini-0.9-retired")


class TestDatabasePreferenceStore(unittest.TestCase):
    def test_model_survives_reopen(self):
        url = f"sqlite:///{settings.database_path}"

        first = create_engine(url)
        Preferences(DatabasePreferenceStore(first)).set_model("gemini-1.5-flash")
        first.dispose()

        second = create_engine(url)
        self.assertEqual(Preferences(DatabasePreferenceStore(second)).get_model(), "gemini-1.5-flash")
        second.dispose()

    def test_default_engine_survives_reset(self):
        prefs = Preferences(DatabasePreferenceStore())
        prefs.set_key("abc123")
        prefs.set_model("gemini-1.0-pro")

        reset_engine()

        reopened = Preferences(DatabasePreferenceStore())
        self.assertEqual(reopened.get_key(), "abc123")
        self.assertEqual(reopened.get_model(), "gemini-1.0-pro")

    def test_overwrite(self):
        store = DatabasePreferenceStore()
        store.set(MODEL_PREF, "gemini-1.5-pro")
        store.set(MODEL_PREF, "gemini-1.5-flash")
        self.assertEqual(store.get(MODEL_PREF), "gemini-1.5-flash")

    def test_first_write_and_update_timestamps(self):
        store = DatabasePreferenceStore()
        store.set(API_KEY_PREF, "first")
        store.set(API_KEY_PREF, "second")

        with get_session() as session:
            pref = session.get(Preference, API_KEY_PREF)
            self.assertEqual(pref.value, "second")
            self.assertIsNotNone(pref.updated_at)

    def test_updated_at_is_timezone_aware(self):
        pref = Preference(key=MODEL_PREF, value="gemini-1.5-pro")
        self.assertIsNotNone(pref.updated_at.tzinfo)

    def test_missing_key_is_none(self):
        self.assertIsNone(DatabasePreferenceStore().get("nothing-here"))

    def test_read_failure_raises_storage_error(self):
        store = DatabasePreferenceStore()
        failure = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with patch("video_insights.storage.database.get_session", side_effect=failure):
            with self.assertRaises(StorageError):
                store.get(API_KEY_PREF)

    def test_write_failure_raises_storage_error(self):
        store = DatabasePreferenceStore()
        failure = OperationalError("INSERT", {}, Exception("database is locked"))
        with patch("video_insights.storage.database.get_session", side_effect=failure):
            with self.assertRaises(StorageError):
                store.set(API_KEY_PREF, "abc")


if __name__ == "__main__":
    unittest.main()
