from sqlalchemy.exc import OperationalError
from helpers import post_product, make_product, list_products


def _fail_commit(*args, **kwargs):
    raise OperationalError("COMMIT", {}, Exception("disk I/O error"))


def test_create_storage_failure_returns_500(client, monkeypatch):
    import sqlalchemy.orm.session
    monkeypatch.setattr(sqlalchemy.orm.session.Session, "commit", _fail_commit)

    r = post_product(client)
    assert r.status_code == 500
    assert r.get_json() == {"success": False, "message": "Server Error"}


def test_create_storage_failure_rolls_back(client, monkeypatch):
    import sqlalchemy.orm.session
    monkeypatch.setattr(sqlalchemy.orm.session.Session, "commit", _fail_commit)
    post_product(client)
    monkeypatch.undo()

    assert list_products(client) == []


def test_list_storage_failure_returns_500(client, monkeypatch):
    import services.catalog

    def broken_list(self):
        raise OperationalError("SELECT", {}, Exception("no such table: products"))

    monkeypatch.setattr(services.catalog.ProductService, "list_products", broken_list)
    r = client.get("/api/products")
    assert r.status_code == 500
    assert r.get_json()["success"] is False


def test_delete_storage_failure_keeps_product(client, monkeypatch):
    created = make_product(client)

    import sqlalchemy.orm.session
    monkeypatch.setattr(sqlalchemy.orm.session.Session, "commit", _fail_commit)
    r = client.delete(f"/api/products/{created['id']}")
    monkeypatch.undo()

    assert r.status_code == 500
    assert [p["id"] for p in list_products(client)] == [created["id"]]
