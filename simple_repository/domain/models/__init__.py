"""Domain model package.

Value objects returned by repositories alongside ORM instances.  No ORM or
infrastructure dependencies.
"""

from .pagination import Page

__all__ = ["Page"]
