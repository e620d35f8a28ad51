import os
from datetime import timedelta

import pytest

# Required settings must exist before the package is imported
os.environ["LEADERBOARD_STORE_URL"] = "https://store.test/v3/b/leaderboard"
os.environ["LEADERBOARD_MASTER_KEY"] = "test-master-key"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["RESET_DELAY_SECONDS"] = "0"

from tests.support import BASE_TIME, StoreStub  # noqa: E402


@pytest.fixture()
def store_stub():
    return StoreStub()


@pytest.fixture()
def fixed_clock():
    return lambda: BASE_TIME + timedelta(hours=1)
