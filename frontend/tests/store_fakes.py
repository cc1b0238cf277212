import httpx
from catalog_client.settings import ClientSettings
from catalog_client.store import ProductStore

BASE_URL = "http://catalog.test"

PEN = {"id": "p-1", "name": "Pen", "price": 1.5, "image": "pen.png"}
MUG = {"id": "p-2", "name": "Mug", "price": 8.0, "image": "mug.png"}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def make_store(handler):
    transport = RecordingTransport(handler)
    client = httpx.AsyncClient(base_url=BASE_URL, transport=transport)
    return ProductStore(client=client, settings=ClientSettings(API_URL=BASE_URL)), transport


def respond(status_code=200, json=None, text=None):
    """Handler returning the same canned response for every request."""
    def handler(request):
        if json is not None:
            return httpx.Response(status_code, json=json)
        return httpx.Response(status_code, text=text or "")
    return handler


def unreachable(request):
    raise httpx.ConnectError("Connection refused", request=request)
