import pytest

from smartfin.storage import LocalStorage

BROWSER = "browser-a"


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "smartfin" / "local_storage.json")


@pytest.fixture
def storage(storage_path):
    return LocalStorage(storage_path, namespace=BROWSER)
