"""Custom exceptions for docpages."""


class DocpagesError(Exception):
    """Base exception for docpages operations."""


class DocumentParseError(DocpagesError):
    """Raw document text could not be decoded."""
