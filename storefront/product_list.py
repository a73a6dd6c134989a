# storefront/product_list.py

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Callable, List, Optional

import pandas as pd

from storefront import catalog
from storefront.models import Product
from storefront.logger import get_logger

log = get_logger(__name__)

ERROR_MESSAGE = "Unable to load products. Please try again later."
TABLE_COLUMNS = ["Image", "Title", "Price", "Category"]

# Shared by every list view; threads are created on first submit
_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="catalog-fetch")


class MountToken:
  """Lifetime marker of one view mount. Cancelled on unmount."""

  def __init__(self):
    self._cancelled = threading.Event()

  def cancel(self):
    self._cancelled.set()

  @property
  def cancelled(self) -> bool:
    return self._cancelled.is_set()


class ProductListView:
  """
  Product listing page state.

  Each instance is mounted once and performs exactly one catalog read.
  The result lands in `products` (server order) or sets `error`; a read
  that settles after `unmount()` is dropped.
  """

  def __init__(self, fetch: Optional[Callable[[], List[Product]]] = None, executor: Optional[ThreadPoolExecutor] = None):
    self.products: List[Product] = []
    self.error = False
    self._fetch = fetch or catalog.fetch_products
    self._executor = executor or _executor
    self._token: Optional[MountToken] = None
    self._settled = threading.Event()
    # Guards the token check and the state update against unmount()
    self._lock = threading.Lock()

  def mount(self) -> Future:
    if self._token is not None:
      raise RuntimeError("ProductListView can only be mounted once")
    token = MountToken()
    self._token = token
    log.debug("Product list mounted, fetching catalog")

    future = self._executor.submit(self._fetch)
    future.add_done_callback(partial(self._settle, token))
    return future

  def unmount(self):
    with self._lock:
      if self._token is not None:
        self._token.cancel()
    log.debug("Product list unmounted")

  @property
  def mounted(self) -> bool:
    return self._token is not None and not self._token.cancelled

  @property
  def settled(self) -> bool:
    return self._settled.is_set()

  def wait(self, timeout: Optional[float] = None) -> bool:
    """Block until the fetch of this mount has been applied or dropped."""
    return self._settled.wait(timeout)

  def _settle(self, token: MountToken, future: Future):
    try:
      with self._lock:
        if token.cancelled:
          log.info("Catalog fetch settled after unmount, result discarded")
          return

        exc = future.exception()
        if exc is not None:
          log.error(f"Error fetching products: {exc}", exc_info=exc)
          self.error = True
          return

        self.products = list(future.result())
        self.error = False
        log.info(f"Product list loaded with {len(self.products)} products")
    finally:
      self._settled.set()


def products_frame(products: List[Product]) -> pd.DataFrame:
  """Table rows of the product list, one per product, indexed by product id."""
  rows = [
    {
      "id": product.id,
      "Image": product.image,
      "Title": product.title,
      "Price": product.price_label,
      "Category": product.category,
    }
    for product in products
  ]
  return pd.DataFrame(rows, columns=["id"] + TABLE_COLUMNS).set_index("id")
