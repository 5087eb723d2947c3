"""GigaDB browser: controllers and views for the GigaDB user service."""

__version__ = "0.1.0"
