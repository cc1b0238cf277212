import os
import logging
from typing import Any
from dotenv import load_dotenv

# Initialize environment configuration from local or project-level .env files
dotenv_paths = [
    os.path.join(os.path.dirname(__file__), '.env'),
    os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env'),
    os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env.example')
]

for path in dotenv_paths:
    if os.path.exists(path):
        load_dotenv(path)
        break

from flask import Flask, jsonify
from flask_cors import CORS
from db import init_db
from routes.products import products_bp

# Configure high-level logging defaults for the backend application
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """
    Builds the catalog Flask application with CORS and the product routes.

    Returns:
        A configured Flask instance.
    """
    flask_app = Flask(__name__)
    CORS(flask_app)
    flask_app.register_blueprint(products_bp, url_prefix="/api")

    @flask_app.route("/api/health")
    def health() -> Any:
        """
        Verifies the operational status of the Flask application.

        Returns:
            A JSON response indicating the service is healthy.
        """
        return jsonify({"status": "ok"})

    return flask_app


app = create_app()

if __name__ == "__main__":
    # Ensure the database schema is initialized before accepting requests
    init_db()

    port = int(os.environ.get("PORT", "8000"))
    debug = os.environ.get("FLASK_DEBUG", "true").lower() == "true"
    app.run(port=port, debug=debug)
