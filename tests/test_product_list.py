# tests/test_product_list.py

import threading
import pytest
import logging
from concurrent.futures import ThreadPoolExecutor
import storefront.catalog as catalog_module
import storefront.exceptions as ex
from storefront.models import Product
from storefront.product_list import ProductListView, products_frame, TABLE_COLUMNS
from storefront.logger import configure_logging
configure_logging()

test_log = logging.getLogger("tests")


def make_products(n):
  return [
    Product(id=100 - i, title=f"Product {i}", price=i + 0.5, category="misc", image=f"https://img.test/{i}.png")
    for i in range(n)
  ]


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
  monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def executor():
  pool = ThreadPoolExecutor(max_workers=1)
  yield pool
  pool.shutdown(wait=True)


@pytest.mark.parametrize("n", [0, 1, 5])
def test_rows_match_response(executor, n):
  products = make_products(n)
  view = ProductListView(fetch=lambda: products, executor=executor)
  view.mount()

  assert view.wait(timeout=5)
  assert view.error is False
  frame = products_frame(view.products)
  assert len(frame) == n
  assert list(frame.index) == [p.id for p in products]
  assert list(frame.columns) == TABLE_COLUMNS
  test_log.info(f"test_rows_match_response ({n}) completed successfully.")


def test_frame_columns():
  frame = products_frame([Product(id=7, title="Lamp", price=15, category="home", image="https://img.test/lamp.png")])
  row = frame.loc[7]
  assert row["Image"] == "https://img.test/lamp.png"
  assert row["Title"] == "Lamp"
  assert row["Price"] == "$15"
  assert row["Category"] == "home"


def test_integral_float_price_label():
  assert Product(id=1, title="Mug", price=10.0, category="home", image="https://img.test/mug.png").price_label == "$10"
  assert Product(id=2, title="Mug", price=10.5, category="home", image="https://img.test/mug.png").price_label == "$10.5"


@pytest.mark.parametrize("error", [
  ex.CatalogHTTPError(500),
  ex.CatalogConnectionError("refused"),
  ex.CatalogDecodeError("not a list"),
  RuntimeError("unexpected"),
])
def test_fetch_failure_sets_error(executor, error):
  def failing_fetch():
    raise error

  view = ProductListView(fetch=failing_fetch, executor=executor)
  view.mount()

  assert view.wait(timeout=5)
  assert view.error is True
  assert view.products == []


def test_default_fetch_uses_catalog(monkeypatch, executor):
  products = make_products(2)
  monkeypatch.setattr(catalog_module, "fetch_products", lambda: products)

  view = ProductListView(executor=executor)
  view.mount()
  assert view.wait(timeout=5)
  assert view.products == products


def test_exactly_one_fetch_per_mount(executor):
  calls = []

  def fetch():
    calls.append(1)
    return []

  view = ProductListView(fetch=fetch, executor=executor)
  view.mount()
  view.wait(timeout=5)
  with pytest.raises(RuntimeError):
    view.mount()
  assert len(calls) == 1


def test_result_after_unmount_is_discarded(executor):
  gate = threading.Event()
  products = make_products(3)

  def slow_fetch():
    gate.wait(timeout=5)
    return products

  view = ProductListView(fetch=slow_fetch, executor=executor)
  future = view.mount()
  assert view.mounted
  view.unmount()
  assert not view.mounted

  gate.set()
  future.result(timeout=5)
  assert view.wait(timeout=5)
  assert view.products == []
  assert view.error is False
  test_log.info("test_result_after_unmount_is_discarded completed successfully.")


def test_failure_after_unmount_is_discarded(executor):
  gate = threading.Event()

  def slow_failing_fetch():
    gate.wait(timeout=5)
    raise ex.CatalogHTTPError(502)

  view = ProductListView(fetch=slow_failing_fetch, executor=executor)
  view.mount()
  view.unmount()
  gate.set()

  assert view.wait(timeout=5)
  assert view.error is False


def test_not_settled_before_fetch_returns(executor):
  gate = threading.Event()
  view = ProductListView(fetch=lambda: gate.wait(timeout=5) and [], executor=executor)
  view.mount()

  assert view.settled is False
  assert view.products == []
  gate.set()
  assert view.wait(timeout=5)
  assert view.settled is True


class GatedProducts:
  """Iterable that blocks while the view copies it into its state."""

  def __init__(self, products):
    self.products = products
    self.entered = threading.Event()
    self.release = threading.Event()

  def __iter__(self):
    self.entered.set()
    self.release.wait(timeout=5)
    return iter(self.products)


def test_unmount_waits_for_result_being_applied(executor):
  products = make_products(2)
  gated = GatedProducts(products)
  view = ProductListView(fetch=lambda: gated, executor=executor)
  view.mount()
  assert gated.entered.wait(timeout=5)

  unmounting = threading.Thread(target=view.unmount)
  unmounting.start()
  unmounting.join(timeout=0.2)
  assert unmounting.is_alive()

  gated.release.set()
  unmounting.join(timeout=5)
  assert not unmounting.is_alive()
  assert view.products == products
  assert not view.mounted
  test_log.info("test_unmount_waits_for_result_being_applied completed successfully.")
