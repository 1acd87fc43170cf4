"""Blog list API: blog CRUD with user accounts and bearer-token authentication."""

__version__ = "0.1.0"
