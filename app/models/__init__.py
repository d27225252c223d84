# Import all models so Alembic can detect them
from app.models.artist import Artist

__all__ = [
    "Artist",
]
