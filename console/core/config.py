import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    api_base_url: str = os.getenv(
        "API_BASE_URL",
        "http://localhost:8080/api/v1"
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Dashboard
    low_stock_threshold: int = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))
    recent_orders_limit: int = int(os.getenv("RECENT_ORDERS_LIMIT", "5"))


settings = Settings()
