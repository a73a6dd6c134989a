# storefront/exceptions.py

class CatalogError(Exception):
  """Base of every catalog fetch failure"""

class CatalogTimeoutError(CatalogError):
  pass

class CatalogConnectionError(CatalogError):
  pass

class CatalogHTTPError(CatalogError):
  def __init__(self, status_code: int, message: str = None):
    self.status_code = status_code
    self.message = message or f"HTTP error {status_code}"
    super().__init__(self.message)

class CatalogDecodeError(CatalogError):
  """Response body is not a list of products"""
