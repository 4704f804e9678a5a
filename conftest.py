import os
import sys
from pathlib import Path

import pytest

# Ensures 'src' is on sys.path before test collection so the package can be
# imported without an editable install.

# Fail fast if Python version is unsupported
if sys.version_info < (3, 10):
    print(
        f"ERROR: This project requires Python 3.10+ (found {sys.version.split()[0]}).",
        file=sys.stderr,
    )
    sys.exit(1)


ROOT_DIR = Path(__file__).parent.absolute()
src_dir = ROOT_DIR / "src"

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _isolate_data_dictionary_env(monkeypatch):
    """Keep host configuration from leaking into tests."""
    for name in (
        "DATABASE_URL",
        "DATA_DICTIONARY_FORMAT",
        "DATA_DICTIONARY_SCHEMA",
        "DATA_DICTIONARY_EXCLUDE_TABLES",
    ):
        monkeypatch.delenv(name, raising=False)


def pytest_collection_modifyitems(config, items):
    """Skipping integration tests unless RUN_INTEGRATION_TESTS=1."""
    run_integration = os.getenv("RUN_INTEGRATION_TESTS", "0") == "1"

    skip_integration = pytest.mark.skip(
        reason="Skipping integration tests (set RUN_INTEGRATION_TESTS=1 to run)"
    )
    for item in items:
        is_integration_path = f"{os.sep}tests{os.sep}integration{os.sep}" in str(item.fspath)
        if (is_integration_path or item.get_closest_marker("integration")) and not run_integration:
            item.add_marker(skip_integration)
