from datetime import datetime

import pytest

from julaaz import create_app
from julaaz.services.messaging_service import MessagingStore

FIXED_NOW = datetime(2025, 1, 6, 9, 30)


@pytest.fixture
def messaging_store():
    return MessagingStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def app(messaging_store):
    app = create_app(messaging=messaging_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
