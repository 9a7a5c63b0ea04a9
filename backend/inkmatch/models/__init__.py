from .base import BaseModel
from .document import Document

__all__ = [
    "BaseModel",
    "Document",
]
