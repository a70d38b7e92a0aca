"""Products & Categories API.

CRUD service for products and categories, where every product is
linked to exactly 2 or 3 categories.
"""

__version__ = "0.1.0"
