# storefront/add_product.py

import math
import re
from typing import Callable, List, Optional

from storefront.models import HOME_PATH, Navigate, NewProductForm, SubmitResult
from storefront.logger import get_logger

log = get_logger(__name__)

FORM_FIELDS = ("name", "image", "price", "category")
FIELD_LABELS = {
  "name": "Product Name",
  "image": "Image URL",
  "price": "Price",
  "category": "Category",
}

IMAGE_ERROR = 'Image URL must start with "http" or "https".'
PRICE_ERROR = "Price must be a positive value."
ACKNOWLEDGEMENT = "Product added successfully!"

_decimal_pattern = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def coerce_price(value: str) -> Optional[float]:
  """
  Converts the price input text to a number.

  Whitespace is stripped and an empty string is 0. Anything that is not a
  plain decimal literal (including nan and inf) returns None.
  """
  text = value.strip()
  if not text:
    return 0.0
  if not _decimal_pattern.fullmatch(text):
    return None
  number = float(text)
  if not math.isfinite(number):
    return None
  return number


def log_submission(form: NewProductForm):
  log.info(f"Product added: {form.model_dump()}")


class AddProductForm:
  """Add product page state: the form record and the last validation error."""

  def __init__(self, on_submit: Optional[Callable[[NewProductForm], None]] = None):
    self.form = NewProductForm()
    self.error = ""
    self.on_submit = on_submit or log_submission

  # The form is created empty on construction; nothing else to do per mount
  def mount(self):
    log.debug("Add product form mounted")

  def unmount(self):
    log.debug("Add product form unmounted")

  def update_field(self, name: str, value: str):
    if name not in FORM_FIELDS:
      raise ValueError(f"Unknown form field: {name}")
    setattr(self.form, name, value)

  def missing_fields(self) -> List[str]:
    """Fields left empty; the input widgets require all four."""
    return [name for name in FORM_FIELDS if not getattr(self.form, name)]

  def validate(self) -> str:
    if not self.form.image.startswith("http"):
      return IMAGE_ERROR

    price = coerce_price(self.form.price)
    if price is None or price <= 0:
      return PRICE_ERROR

    return ""

  def submit(self) -> SubmitResult:
    self.error = self.validate()
    if self.error:
      log.info(f"Add product validation failed: {self.error}")
      return SubmitResult(error=self.error)

    self.on_submit(self.form.model_copy())
    return SubmitResult(acknowledgement=ACKNOWLEDGEMENT, navigate=Navigate(HOME_PATH))
