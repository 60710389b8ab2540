import pytest

from storefront.config import Settings
from storefront.main import create_app

TEST_CONFIG = {
    "PINECONE_API_KEY": "",
    "EMBEDDING_PROVIDER": "huggingface",
    "HF_TOKEN": "hf-test",
    "EMBEDDING_DIMENSION": 1024,
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture
def settings():
    return Settings.from_env(TEST_CONFIG)


@pytest.fixture
def pinecone_settings():
    return Settings.from_env({**TEST_CONFIG, "PINECONE_API_KEY": "pc-test"})


@pytest.fixture
def client():
    app = create_app(TEST_CONFIG)
    app.config["TESTING"] = True
    return app.test_client()
