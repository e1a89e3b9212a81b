"""
Exception classes for the 2D-DOC Python SDK
"""

from typing import Optional, Dict, Any


class TwoDDocError(Exception):
    """Base exception for all 2D-DOC SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class MalformedData(TwoDDocError):
    """Base class for payload, header and body grammar violations"""
    pass


class MalformedPayload(MalformedData):
    """Exception raised when the payload cannot be split into message and signature"""
    
    def __init__(self, message: str, error_code: str = "MALFORMED_PAYLOAD", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MalformedHeader(MalformedData):
    """Exception raised when the fixed-width header does not match its grammar"""
    
    def __init__(self, message: str, error_code: str = "MALFORMED_HEADER", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MalformedBody(MalformedData):
    """Exception raised when a body does not match its document type field table"""
    
    def __init__(self, message: str, error_code: str = "MALFORMED_BODY", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MalformedSignatureEncoding(TwoDDocError):
    """Exception raised when the base32 signature cannot be turned into R and S"""
    
    def __init__(self, message: str, error_code: str = "MALFORMED_SIGNATURE_ENCODING",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class InvalidPublicKey(TwoDDocError):
    """Exception raised when the PEM public key or certificate cannot be loaded"""
    
    def __init__(self, message: str, error_code: str = "INVALID_PUBLIC_KEY", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class UnknownDocumentType(TwoDDocError):
    """Exception raised when a document type name is not registered"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_DOCUMENT_TYPE",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ConfigError(TwoDDocError):
    """Exception raised for configuration loading and validation errors"""
    
    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
