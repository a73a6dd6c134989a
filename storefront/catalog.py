# storefront/catalog.py

import requests
from pydantic import TypeAdapter, ValidationError
from typing import List, Optional
from storefront.models import Product
from storefront.config import CATALOG_URL
from storefront.logger import get_logger
import storefront.exceptions as ex

# Get the logger for this module. Its name will be 'storefront.catalog'.
log = get_logger(__name__)

# Session object. No retry adapter is mounted: a failed fetch is final.
session = requests.session()

_products_adapter = TypeAdapter(List[Product])


def fetch_products(url: Optional[str] = None) -> List[Product]:
  """
  Reads the product catalog with a single GET request.

  Args:
    url (str): Catalog endpoint, defaults to CATALOG_URL

  Returns:
    List[Product]: Products in the order the catalog sent them

  Raises:
    CatalogError subclasses for timeouts, connection errors, non-success
    statuses and bodies that are not a list of products.
  """
  url = url or CATALOG_URL
  log.info(f"Fetching product catalog from {url}")

  try:
    response = session.get(url)
    response.raise_for_status()
  except requests.exceptions.Timeout as e:
    log.error(f"[CATALOG] Timeout error while fetching {url}. Exception: {e}")
    raise ex.CatalogTimeoutError(f"Request timed out while fetching {url}.")
  except requests.exceptions.ConnectionError as e:
    log.error(f"[CATALOG] Connection error while fetching {url}. Exception: {e}")
    raise ex.CatalogConnectionError(f"Connection error for {url}. Please check your network.")
  except requests.exceptions.HTTPError as e:
    status_code = e.response.status_code if e.response is not None else None
    log.error(f"[CATALOG] HTTP error {status_code} for {url}. Exception {e}")
    raise ex.CatalogHTTPError(status_code=status_code, message=f"Returned HTTP {status_code}")
  except requests.exceptions.RequestException as e:
    log.error(f"[CATALOG] Request failed for {url}. Exception: {e}")
    raise ex.CatalogError(f"Generic request failure for {url}: {e}")

  # Only 2xx is a success; raise_for_status() lets 3xx through
  if not 200 <= response.status_code < 300:
    log.error(f"[CATALOG] Non-success status {response.status_code} for {url}")
    raise ex.CatalogHTTPError(status_code=response.status_code, message=f"Returned HTTP {response.status_code}")

  try:
    products = _products_adapter.validate_python(response.json())
  except (ValueError, ValidationError) as e:
    log.error(f"[CATALOG] Could not decode catalog response from {url}. Exception: {e}")
    raise ex.CatalogDecodeError(f"Catalog response is not a list of products: {e}")

  log.info(f"Fetched {len(products)} products from {url} (Status: {response.status_code})")
  return products
