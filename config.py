# --- Configuration Constants ---
API_BASE_URL = "http://localhost:4000"
ITEMS_PATH = "/items"
DEFAULT_CATEGORY_FILTER = "All"

# (name, category) pairs restored into the store before each test
SEED_ITEMS = (
    ("Yogurt", "Dairy"),
    ("Pomegranate", "Fruit"),
    ("Lettuce", "Vegetable"),
)
