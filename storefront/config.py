# storefront/config.py

import os

# APP_ENV (production, development, testing) and LOG_DIR are read by
# configure_logging() each time it runs.

# Public product catalog
CATALOG_URL = os.getenv("CATALOG_URL", "https://fakestoreapi.com/products")
