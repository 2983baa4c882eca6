"""Allow ``python -m food_order_app``."""

import sys

from food_order_app.main import main

if __name__ == "__main__":
    sys.exit(main())
