# WORDPASS API Routers
from app.routers import health, passphrase

__all__ = ["health", "passphrase"]
