"""User Service: validated CRUD for user records over SQLAlchemy."""

__version__ = "0.1.0"
