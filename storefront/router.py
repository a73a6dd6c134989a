# storefront/router.py

from typing import Callable, Dict, List, Optional, Tuple

from storefront.models import ADD_PRODUCT_PATH, HOME_PATH, Navigate
from storefront.logger import get_logger

log = get_logger(__name__)

# Navbar entries: (label, path)
NAV_LINKS: List[Tuple[str, str]] = [
  ("Home", HOME_PATH),
  ("Add Product", ADD_PRODUCT_PATH),
]


class Router:
  """
  Maps paths to view factories and owns the active view.

  Every navigation to a different path unmounts the active view and mounts
  a fresh one, so views never share state across mounts.
  """

  def __init__(self, routes: Dict[str, Callable], path: str = HOME_PATH):
    self.routes = routes
    self.path: Optional[str] = None
    self.view = None
    self.mounts = 0
    self.navigate(path)

  def navigate(self, path: str) -> bool:
    """Returns False when path is already active."""
    if path == self.path:
      return False

    if self.view is not None:
      self.view.unmount()
      self.view = None

    self.path = path
    factory = self.routes.get(path)
    if factory is None:
      log.warning(f"No route for path '{path}'")
      return True

    log.info(f"Navigating to '{path}'")
    self.view = factory()
    self.mounts += 1
    self.view.mount()
    return True

  def dispatch(self, command: Navigate) -> bool:
    return self.navigate(command.path)
