import pytest
import httpx
from unittest.mock import patch
from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from base import Base
from routes.products import products_bp
from store_fakes import make_store
import schema


@pytest.fixture
def api_app():
    """Catalog API backed by an in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestSession = sessionmaker(bind=engine)

    def mock_get_db():
        s = TestSession()
        try:
            yield s
        finally:
            s.close()

    flask_app = Flask(__name__)
    flask_app.register_blueprint(products_bp, url_prefix="/api")
    flask_app.config["TESTING"] = True

    with patch("routes.products.get_db", mock_get_db):
        yield flask_app

    Base.metadata.drop_all(engine)


@pytest.fixture
def live_store(api_app):
    """ProductStore whose requests are served by the Flask test client."""
    flask_client = api_app.test_client()

    def forward(request):
        r = flask_client.open(
            request.url.raw_path.decode(),
            method=request.method,
            data=request.content,
            content_type=request.headers.get("content-type"),
        )
        return httpx.Response(r.status_code, content=r.get_data(), headers={"Content-Type": r.content_type})

    store, _ = make_store(forward)
    return store
