class StaticMapKitError(Exception):
    """Base exception for staticmapkit"""
    pass

class MissingApiKeyError(StaticMapKitError):
    """Raised when no Google Maps API key can be found"""
    pass

class InvalidColorError(StaticMapKitError, ValueError):
    """Raised when a polyline color cannot be interpreted"""
    pass

class ImageDownloadError(StaticMapKitError):
    """Raised when fetching a static map image fails"""
    pass
