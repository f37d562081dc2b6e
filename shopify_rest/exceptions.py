"""
Custom exception classes for the Shopify REST client.

Request operations return these as items of an error list instead of raising
them; only client construction and response decoding raise.
"""

from typing import Dict, Any, Optional


class ShopifyAPIError(Exception):
    """Base exception for all Shopify API related errors."""
    
    def __init__(self, message: str, response_data: Optional[Dict[str, Any]] = None, 
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.response_data = response_data or {}
        self.status_code = status_code
        
    def __str__(self):
        return f"ShopifyAPIError: {self.message}"


class ValidationError(ShopifyAPIError):
    """Raised when input validation fails."""
    
    def __init__(self, message: str = "Validation failed", 
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        
    def __str__(self):
        base_msg = f"ValidationError: {self.message}"
        if self.field:
            base_msg += f" (field: {self.field})"
        return base_msg


class SerializationError(ShopifyAPIError):
    """Raised when a request body cannot be encoded as JSON."""
    
    def __init__(self, message: str = "Serialization failed", 
                 original: Optional[Exception] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.original = original
        
    def __str__(self):
        base_msg = f"SerializationError: {self.message}"
        if self.original is not None:
            base_msg += f" ({self.original})"
        return base_msg


class ConnectionError(ShopifyAPIError):
    """Raised when the transport fails (DNS, TLS, connection, timeout)."""
    
    def __init__(self, message: str = "Connection failed", 
                 original: Optional[Exception] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.original = original
        
    def __str__(self):
        return f"ConnectionError: {self.message}"


class DecodeError(ShopifyAPIError):
    """Raised when a response body cannot be decoded into a response record."""
    
    def __init__(self, message: str = "Decode failed", 
                 body: Optional[bytes] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body = body
        
    def __str__(self):
        return f"DecodeError: {self.message}"
