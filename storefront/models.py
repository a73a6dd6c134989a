# storefront/models.py

from pydantic import BaseModel
from typing import NamedTuple, Optional, Union

HOME_PATH = "/"
ADD_PRODUCT_PATH = "/add-product"


class Product(BaseModel):
  """Read-only catalog record. Extra catalog keys are ignored."""
  id: int
  title: str
  price: Union[int, float]
  category: str
  image: str

  @property
  def price_label(self) -> str:
    # 10.0 in the catalog reads as $10
    price = self.price
    if isinstance(price, float) and price.is_integer():
      price = int(price)
    return f"${price}"


class NewProductForm(BaseModel):
  name: str = ""
  image: str = ""
  price: str = ""
  category: str = ""


class Navigate(NamedTuple):
  """Navigation command returned by a workflow, handled by the router."""
  path: str


class SubmitResult(BaseModel):
  error: str = ""
  acknowledgement: str = ""
  navigate: Optional[Navigate] = None

  @property
  def ok(self) -> bool:
    return not self.error
