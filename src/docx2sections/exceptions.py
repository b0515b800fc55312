"""Custom exceptions for docx2sections."""


class Docx2sectionsError(Exception):
    """Base exception for docx2sections operations."""


class FileReadError(Docx2sectionsError):
    """Error while reading the uploaded file."""


class UnsupportedFileTypeError(FileReadError):
    """Uploaded file is not a .docx document."""


class ConversionError(Docx2sectionsError):
    """Error during document to HTML conversion."""


class UnexpectedError(Docx2sectionsError):
    """Any other failure in the processing path."""
