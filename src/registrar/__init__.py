"""
Registrar backend
GraphQL API over students, departments, courses and teachers
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
