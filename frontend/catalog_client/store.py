import logging
from typing import Any, Dict, List, Optional
import httpx
from catalog_client.result import Result
from catalog_client.settings import ClientSettings, load_settings

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/api/products"
REQUIRED_FIELDS = ("name", "image", "price")

# Failures converted to a Result; InvalidURL is not an HTTPError and TypeError
# comes from JSON-encoding an unsupported value
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError)


def _read_envelope(response: httpx.Response) -> Dict[str, Any]:
    """
    Parses a JSON envelope from a successful response.

    Raises:
        ValueError: The body is not valid JSON or not a JSON object.
    """
    body = response.json()
    if not isinstance(body, dict):
        raise ValueError(f"Unexpected response body: {response.text[:100]}")
    return body


def _error_message(response: httpx.Response, default: str) -> str:
    """
    Extracts human-readable error text from a non-success response.

    Prefers the envelope's message, then the raw body, then the default.
    """
    text = response.text
    if not text:
        return default
    try:
        body = response.json()
    except ValueError:
        return text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return text


class ProductStore:
    """
    Client-side mirror of the catalog's product list.

    Each instance owns its local collection and mutates it only after the
    API acknowledges a request. Every operation returns a Result and never
    raises, so UI code only has to display Result.message on failure.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[ClientSettings] = None,
    ):
        self.products: List[Dict[str, Any]] = []
        self._owns_client = client is None
        if client is None:
            settings = settings or load_settings()
            client = httpx.AsyncClient(
                base_url=base_url or settings.API_URL,
                timeout=settings.TIMEOUT,
            )
        self._client = client

    async def __aenter__(self) -> "ProductStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def set_products(self, products: List[Dict[str, Any]]) -> None:
        self.products = list(products)

    async def fetch_products(self) -> Result:
        """
        Replaces the local collection with the server's product list.

        A successful response with an empty body counts as an empty catalog.
        """
        try:
            response = await self._client.get(PRODUCTS_PATH)
            if not response.is_success:
                logger.error(f"Failed to fetch products: {response.status_code} {response.reason_phrase}")
                return Result.fail("Failed to fetch products")

            body = _read_envelope(response) if response.text else {"data": []}
            products = body.get("data") or []
            if not isinstance(products, list):
                raise ValueError("Product list payload is not an array")
            if not all(isinstance(p, dict) for p in products):
                raise ValueError("Product list contains non-object entries")
        except REQUEST_ERRORS as e:
            logger.error(f"Error fetching products: {e}")
            return Result.fail("An error occurred while fetching products")

        self.set_products(products)
        return Result.ok("Products fetched successfully", products)

    async def create_product(self, candidate: Dict[str, Any]) -> Result:
        """
        Creates a product on the server and appends it locally.

        Candidates missing a name, image or price are rejected before any
        request is sent.
        """
        if any(not candidate.get(field) for field in REQUIRED_FIELDS):
            return Result.fail("Please fill in all fields.")

        try:
            response = await self._client.post(PRODUCTS_PATH, json=candidate)
            if not response.is_success:
                return Result.fail(_error_message(response, "Failed to create product"))

            product = _read_envelope(response).get("data")
            if not isinstance(product, dict):
                raise ValueError("Created product missing from response")
        except REQUEST_ERRORS as e:
            logger.error(f"Error creating product: {e}")
            return Result.fail("An error occurred while creating the product")

        self.products = [*self.products, product]
        return Result.ok("Product created successfully", product)

    async def delete_product(self, product_id: str) -> Result:
        try:
            response = await self._client.delete(f"{PRODUCTS_PATH}/{product_id}")
            if not response.is_success:
                return Result.fail(_error_message(response, "Failed to delete product"))

            body = _read_envelope(response)
        except REQUEST_ERRORS as e:
            logger.error(f"Error deleting product: {e}")
            return Result.fail("An error occurred while deleting the product")

        if not body.get("success"):
            return Result.fail(body.get("message") or "Failed to delete product")

        self.products = [p for p in self.products if p.get("id") != product_id]
        return Result.ok("Product deleted successfully")

    async def update_product(self, product_id: str, fields: Dict[str, Any]) -> Result:
        """
        Sends a partial update and swaps in the server's copy of the product.
        """
        try:
            response = await self._client.put(f"{PRODUCTS_PATH}/{product_id}", json=fields)
            if not response.is_success:
                return Result.fail(_error_message(response, "Failed to update product"))

            body = _read_envelope(response)
            updated = body.get("data")
            if body.get("success") and not isinstance(updated, dict):
                raise ValueError("Updated product missing from response")
        except REQUEST_ERRORS as e:
            logger.error(f"Error updating product: {e}")
            return Result.fail("An error occurred while updating the product")

        if not body.get("success"):
            return Result.fail(body.get("message") or "Failed to update product")

        self.products = [updated if p.get("id") == product_id else p for p in self.products]
        return Result.ok("Product updated successfully", updated)
