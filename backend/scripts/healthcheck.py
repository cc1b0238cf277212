#!/usr/bin/env python3
import os
import sys
import sqlite3
import httpx
from dotenv import load_dotenv

def print_status(check_name: str, status: bool, details: str = ""):
    """
    Renders the status of a health system check to the console.

    Args:
        check_name: Human-readable identifier for the check.
        status: Boolean indicating success or failure.
        details: Optional supplementary information (e.g., file paths, URLs).
    """
    color = "\033[92m[OK]\033[0m" if status else "\033[91m[FAIL]\033[0m"
    print(f"{color} {check_name:<30} {details}")

def run_healthcheck():
    """
    Coordinates a verification of the catalog backend environment.

    Validates the .env file, the SQLite database and its schema, and the
    availability of the running API.
    """
    print("\n=== Product Catalog Health Verification ===\n")

    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env_path = os.path.join(base_dir, ".env")

    # 1. Check .env file
    has_env = os.path.exists(env_path)
    print_status(".env file exists", has_env, env_path)
    if has_env:
        load_dotenv(env_path)

    # 2. Check Database
    database_url = os.getenv("DATABASE_URL", "sqlite:///catalog.db")
    if not database_url.startswith("sqlite:///"):
        print_status("Database file exists", True, "non-SQLite backend, skipped")
    else:
        db_path = database_url.replace("sqlite:///", "")
        db_full_path = db_path if os.path.isabs(db_path) else os.path.join(base_dir, db_path)

        has_db = os.path.exists(db_full_path)
        print_status("Database file exists", has_db, db_full_path)
        if not has_db:
            print_status("Database schema initialized", False, "DB file missing")
            sys.exit(1)
        try:
            conn = sqlite3.connect(db_full_path)
            cursor = conn.cursor()
            cursor.execute("SELECT name FROM sqlite_master WHERE type='table';")
            tables = [r[0] for r in cursor.fetchall()]
            print_status("Database schema initialized", "products" in tables, f"Found {len(tables)} tables")
            conn.close()
        except sqlite3.Error as e:
            print_status("Database query failed", False, str(e))

    # 3. Check the running API
    port = os.getenv("PORT", "8000")
    url = f"http://localhost:{port}/api/health"
    try:
        r = httpx.get(url, timeout=5)
        print_status("Catalog API reachable", r.status_code == 200, f"HTTP {r.status_code}")
    except httpx.HTTPError as e:
        print_status("Catalog API reachable", False, str(e))

    print("\nHealth check completed.")

if __name__ == "__main__":
    run_healthcheck()
