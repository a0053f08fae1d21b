"""Document parsers"""
from .document_parser import DocumentParser, LoadedDocuments, load_documents_async

__all__ = ["DocumentParser", "LoadedDocuments", "load_documents_async"]
