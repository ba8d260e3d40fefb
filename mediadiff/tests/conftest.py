import shutil

import pytest

from mediadiff.database.manager import DatabaseManager
from mediadiff.tests.fixtures.test_db_setup import build_upload_tree, create_test_database


@pytest.fixture
def test_db():
    """Fresh test database for each test."""
    db_path = create_test_database()
    db_manager = DatabaseManager(db_path)
    yield db_manager
    db_manager.close()
    shutil.rmtree(db_path.parent, ignore_errors=True)


@pytest.fixture
def upload_root(tmp_path):
    """Year/month upload tree populated with the sample files."""
    return build_upload_tree(tmp_path / "uploads")
