import logging
from functools import wraps
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from db import get_db
from services.catalog import ProductService, ProductValidationError

logger = logging.getLogger(__name__)

products_bp = Blueprint("products", __name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def with_catalog(f):
    """
    Decorator that opens a database session for the duration of a request.

    Passes a ProductService bound to that session to the wrapped handler and
    rolls the session back if the persistence layer fails.

    Args:
        f: The route handler function to be wrapped.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        db = next(get_db())
        try:
            return f(*args, catalog=ProductService(db), **kwargs)
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()
    return decorated


@products_bp.errorhandler(SQLAlchemyError)
def handle_storage_error(error):
    logger.error(f"Storage failure: {error}")
    return jsonify({"success": False, "message": "Server Error"}), 500


@products_bp.route("/products", methods=["POST"])
@with_catalog
def create_product(catalog):
    """
    Creates a new product in the catalog.
    ---
    Input (JSON):
        - name (str): Display name
        - price (number): Unit price
        - image (str): Image URL
    Output (201):
        - success (bool): True
        - data (object): The stored product including its assigned id
    Errors:
        - 400: Missing field or non-numeric price
        - 500: Storage failure
    """
    data = _json_body()
    try:
        product = catalog.create_product(data)
    except ProductValidationError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return jsonify({"success": True, "data": product.to_dict()}), 201


@products_bp.route("/products", methods=["GET"])
@with_catalog
def get_all_products(catalog):
    """
    Lists every product in creation order.
    ---
    Output (200):
        - success (bool): True
        - data (list): All stored products
    Errors:
        - 500: Storage failure
    """
    products = catalog.list_products()
    return jsonify({"success": True, "data": [p.to_dict() for p in products]}), 200


@products_bp.route("/products/<product_id>", methods=["PUT"])
@with_catalog
def update_product(catalog, product_id):
    """
    Merges the supplied fields into an existing product.
    ---
    Input (Path):
        - product_id (str): Id of the product to update
    Input (JSON):
        - name, price, image (optional): Fields to overwrite
    Output (200):
        - success (bool): True
        - data (object): The product after the update
    Errors:
        - 400: A supplied field is blank or price is non-numeric
        - 404: Product not found
        - 500: Storage failure
    """
    data = _json_body()
    try:
        product = catalog.update_product(product_id, data)
    except ProductValidationError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    if product is None:
        return jsonify({"success": False, "message": "Product not found"}), 404

    return jsonify({"success": True, "data": product.to_dict()}), 200


@products_bp.route("/products/<product_id>", methods=["DELETE"])
@with_catalog
def delete_product(catalog, product_id):
    """
    Removes a product from the catalog.
    ---
    Input (Path):
        - product_id (str): Id of the product to delete
    Output (200):
        - success (bool): True
        - message (str): Confirmation text
    Errors:
        - 404: Product not found
        - 500: Storage failure
    """
    if not catalog.delete_product(product_id):
        return jsonify({"success": False, "message": "Product not found"}), 404

    return jsonify({"success": True, "message": "Product deleted"}), 200
