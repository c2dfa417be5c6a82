import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""

    PROPERTIES_TABLE: str = "properties"
    IMAGES_BUCKET: str = "property-images"

    MIN_PASSWORD_LENGTH: int = 6

    PRICE_CEILING: int = 99_999_999
    SQFT_CEILING: int = 99_999
    CURRENCY_SYMBOL: str = "₹"
    FINANCE_TYPES: list[str] = ["Cash", "Loan", "EMI", "Lease", "Rent"]

    SITE_NAME: str = "Property Salahe"

    MAX_RETRIES: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        level=level,
    )
    # Quiet noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
