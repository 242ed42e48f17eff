import pytest
import requests
from fastapi.testclient import TestClient

from payment_service.config import Settings
from payment_service.database import init_db, make_engine
from payment_service.main import create_app
from payment_service.replica import ReplicaRouter


@pytest.fixture
def primary_engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'primary.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings():
    return Settings(country_code="id")


@pytest.fixture
def metadata_down(mocker):
    return mocker.patch(
        "payment_service.metadata.requests.get",
        side_effect=requests.ConnectionError("metadata server unreachable"),
    )


@pytest.fixture
def metadata_up(mocker):
    res = mocker.Mock()
    res.content = b"europe-west1"
    return mocker.patch("payment_service.metadata.requests.get", return_value=res)


@pytest.fixture
def client(settings, primary_engine, metadata_up):
    app = create_app(settings, ReplicaRouter(primary_engine))
    with TestClient(app) as c:
        yield c
