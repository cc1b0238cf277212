#!/usr/bin/env python3
import os
import sys
import asyncio
import logging

# Add the parent directory to sys.path to allow imports from the frontend
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog_client.settings import load_settings
from catalog_client.store import ProductStore

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Same lookup order as the backend: project .env, then .env.example
DOTENV_PATHS = [
    os.path.join(PROJECT_ROOT, ".env"),
    os.path.join(PROJECT_ROOT, ".env.example"),
]

SAMPLE_PRODUCTS = [
    {"name": "Pen", "price": 1.5, "image": "https://picsum.photos/seed/pen/400"},
    {"name": "Notebook", "price": 4.25, "image": "https://picsum.photos/seed/notebook/400"},
    {"name": "Desk Lamp", "price": 32.0, "image": "https://picsum.photos/seed/lamp/400"},
]

async def seed():
    """
    Populates a running catalog API with sample products through ProductStore.

    Products already present by name are skipped so the script can be rerun.
    """
    env_file = next((p for p in DOTENV_PATHS if os.path.exists(p)), None)
    settings = load_settings(env_file)
    async with ProductStore(settings=settings) as store:
        result = await store.fetch_products()
        if not result.success:
            logger.error(result.message)
            return 1

        existing = {p.get("name") for p in store.products}
        for candidate in SAMPLE_PRODUCTS:
            if candidate["name"] in existing:
                logger.info(f"Skipping {candidate['name']} (already present)")
                continue
            result = await store.create_product(candidate)
            if result.success:
                logger.info(f"Created {candidate['name']} ({result.data['id']})")
            else:
                logger.error(f"Could not create {candidate['name']}: {result.message}")

        logger.info(f"Catalog now holds {len(store.products)} products at {settings.API_URL}")
    return 0

if __name__ == "__main__":
    sys.exit(asyncio.run(seed()))
