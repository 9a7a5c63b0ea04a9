from sqlalchemy import Column, JSON, String

from .base import BaseModel


class Document(BaseModel):
    """One schemaless record in a named collection (artists, tattoos, likes)."""

    __tablename__ = "documents"

    collection = Column(String(64), primary_key=True)
    doc_id = Column(String(128), primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
