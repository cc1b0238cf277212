import math
import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from schema import Product

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "image")


class ProductValidationError(ValueError):
    """Raised when a write carries missing or unusable product fields."""


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or value == 0


def _coerce_price(value: Any) -> float:
    if isinstance(value, bool):
        raise ProductValidationError("price must be a number")
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ProductValidationError("price must be a number")
    # NaN and infinities cannot be stored or encoded as JSON
    if not math.isfinite(price):
        raise ProductValidationError("price must be a number")
    return price


class ProductService:
    """
    Persistence operations for the product collection.

    Wraps a single SQLAlchemy session; callers own the session lifecycle.
    Writes are committed before returning.
    """
    def __init__(self, db):
        self.db = db

    def list_products(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.created_at.asc()).all()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.db.query(Product).filter_by(id=product_id).first()

    def create_product(self, data: Dict[str, Any]) -> Product:
        """
        Persists a new product and assigns its identifier.

        Args:
            data: Candidate fields; name, price and image are required.

        Returns:
            The stored Product instance.

        Raises:
            ProductValidationError: A required field is absent or price is not numeric.
        """
        if any(_is_missing(data.get(field)) for field in REQUIRED_FIELDS):
            raise ProductValidationError("Please provide all fields")

        now = datetime.now(timezone.utc)
        product = Product(
            id=str(uuid.uuid4()),
            name=data["name"],
            price=_coerce_price(data["price"]),
            image=data["image"],
            created_at=now,
            updated_at=now,
        )
        self.db.add(product)
        self.db.commit()
        logger.info(f"Created product {product.id}")
        return product

    def update_product(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """
        Merges the supplied fields into an existing product.

        Only name, price and image are applied; other keys (including id) are
        ignored. Fields that are supplied must not be blank.

        Returns:
            The updated Product, or None if no product has that id.
        """
        product = self.get_product(product_id)
        if product is None:
            return None

        updates = {field: data[field] for field in REQUIRED_FIELDS if field in data}
        if any(_is_missing(value) for value in updates.values()):
            raise ProductValidationError("Product fields cannot be empty")
        if "price" in updates:
            updates["price"] = _coerce_price(updates["price"])

        for field, value in updates.items():
            setattr(product, field, value)
        product.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        logger.info(f"Updated product {product_id} ({', '.join(updates) or 'no fields'})")
        return product

    def delete_product(self, product_id: str) -> bool:
        product = self.get_product(product_id)
        if product is None:
            return False
        self.db.delete(product)
        self.db.commit()
        logger.info(f"Deleted product {product_id}")
        return True
