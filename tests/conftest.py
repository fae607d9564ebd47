"""
Configuration for pytest tests.
"""

import pytest

from video_insights.config import settings
from video_insights.storage.database import reset_engine


@pytest.fixture(autouse=True)
def isolated_database(tmp_path):
    """Point the preference database at a per-test temporary file."""
    original_db_path = settings.db_path
    original_data_dir = settings.data_dir

    settings.data_dir = tmp_path
    settings.db_path = tmp_path / "video_insights.db"
    reset_engine()

    yield settings.db_path

    reset_engine()
    settings.db_path = original_db_path
    settings.data_dir = original_data_dir
