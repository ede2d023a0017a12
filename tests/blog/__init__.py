"""Sample application used by the repository tests.

User is re-exported at the package root so repositories that do not set
model_package resolve to blog.User.
"""

from .models import User

__all__ = ["User"]
