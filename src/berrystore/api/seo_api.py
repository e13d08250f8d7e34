"""
FastAPI service that exposes location guide pages from the SQLite database.
The insights page reads GET /api/seo/all-pages once per visit.
"""

import logging
import sqlite3
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from berrystore.core.db import get_db_connection
from berrystore.models.api import HealthResponse, SeoPagesResponse
from berrystore.models.article import SeoPage

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Berry Storefront Content API")

# Enable CORS for the Streamlit front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_db():
    """Yield a database connection for one request."""
    conn = get_db_connection()
    try:
        yield conn
    finally:
        conn.close()


def page_row_to_model(row: sqlite3.Row) -> SeoPage:
    """Convert database row to SeoPage model."""
    return SeoPage(
        id=row["id"],
        state=row["state"],
        city=row["city"],
        meta_title=row["meta_title"],
        meta_description=row["meta_description"],
        created_at=row["created_at"],
    )


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


@app.get("/api/seo/all-pages", response_model=SeoPagesResponse)
def all_pages(conn: sqlite3.Connection = Depends(get_db)) -> SeoPagesResponse:
    """Return every location guide page, oldest first."""
    logger.info("[SEO-API] Listing all pages")

    try:
        cursor = conn.cursor()
        cursor.execute("""
            SELECT * FROM seo_pages
            ORDER BY created_at ASC, id ASC
        """)
        rows = cursor.fetchall()
    except sqlite3.Error as e:
        logger.error(f"[SEO-API] Database error: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    if not rows:
        logger.warning("[SEO-API] No location guide pages found")

    return SeoPagesResponse(pages=[page_row_to_model(row) for row in rows])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
