"""
Database initialization and management utilities.
Handles SQLite schema creation and CSV imports for location guide pages.
"""

import csv
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from berrystore import config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def get_db_connection(db_path: Optional[Path] = None):
    """Get SQLite database connection."""
    path = Path(db_path or config.DB_PATH)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        logger.info(f"[DB] Connected to database: {path}")
        return conn
    except sqlite3.Error as e:
        logger.error(f"[DB] Failed to connect to database: {e}")
        raise


def init_database(db_path: Optional[Path] = None, csv_path: Optional[Path] = None):
    """Initialize database schema and seed it from CSV."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS seo_pages (
                id TEXT PRIMARY KEY,
                state TEXT NOT NULL,
                city TEXT NOT NULL,
                meta_title TEXT NOT NULL,
                meta_description TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        conn.commit()
        logger.info("[DB] Database schema created successfully")

    except sqlite3.Error as e:
        logger.error(f"[DB] Failed to initialize database: {e}")
        raise
    finally:
        conn.close()

    import_csv_data(db_path, csv_path)


def import_csv_data(db_path: Optional[Path] = None, csv_path: Optional[Path] = None) -> int:
    """Replace all location guide pages with the rows of the CSV file."""
    csv_path = Path(csv_path or config.SEO_CSV_PATH)

    if not csv_path.exists():
        logger.warning(f"[DB] CSV file not found: {csv_path}")
        return 0

    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    imported = 0

    try:
        cursor.execute("DELETE FROM seo_pages")

        with open(csv_path, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                cursor.execute("""
                    INSERT INTO seo_pages
                    (id, state, city, meta_title, meta_description, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                """, (
                    row["id"],
                    row["state"],
                    row["city"],
                    row["meta_title"],
                    row["meta_description"],
                    row["created_at"],
                ))
                imported += 1

        conn.commit()
        logger.info(f"[DB] Imported {imported} pages from CSV")
        return imported

    except (sqlite3.Error, KeyError) as e:
        conn.rollback()
        logger.error(f"[DB] Failed to import CSV data: {e}")
        raise
    finally:
        conn.close()
