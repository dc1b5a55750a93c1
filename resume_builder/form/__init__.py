"""Form controller: section navigation, updates, draft persistence, progress."""

from .controller import FormController

__all__ = ["FormController"]
