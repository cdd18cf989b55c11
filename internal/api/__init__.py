"""
API Module.
Contains routes, schemas, dependencies and API-related utilities.
"""

from . import dependencies
from . import routes
from . import schemas

__all__ = [
    "dependencies",
    "routes",
    "schemas",
]

