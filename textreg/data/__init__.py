"""Data module: documents, corpus loading and the initial split."""

from .document import Document
from .corpus import documents_from_frame, load_corpus, initial_split

__all__ = ["Document", "documents_from_frame", "load_corpus", "initial_split"]
