import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    # Full override, e.g. sqlite:// for tests
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")

    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASS: Optional[str] = os.getenv("DB_PASS")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: str = os.getenv("DB_PORT", "5432")
    DB_NAME: str = os.getenv("DB_NAME", "sds_compliance")
    DB_SSLMODE: Optional[str] = os.getenv("DB_SSLMODE")

    CORS_ORIGINS: str = os.getenv(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8002")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", 10))

    # SDS rules
    SDS_VALIDITY_YEARS: int = int(os.getenv("SDS_VALIDITY_YEARS", 5))
    SDS_EXPIRY_WARNING_DAYS: int = int(
        os.getenv("SDS_EXPIRY_WARNING_DAYS", 90))

    # Supplier that owns SDS requests raised from the library
    REQUEST_SUPPLIER_NAME: str = os.getenv("REQUEST_SUPPLIER_NAME", "DGXprt")
    REQUEST_SUPPLIER_CONTACT: str = os.getenv(
        "REQUEST_SUPPLIER_CONTACT", "DGXprt Team")
    REQUEST_SUPPLIER_EMAIL: str = os.getenv(
        "REQUEST_SUPPLIER_EMAIL", "support@dgxprt.com")
    REQUEST_SUPPLIER_ADDRESS: str = os.getenv(
        "REQUEST_SUPPLIER_ADDRESS", "DGXprt HQ")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


def build_database_url(s: Settings) -> str:
    if s.DATABASE_URL:
        return s.DATABASE_URL

    url = (
        f"postgresql+psycopg2://{s.DB_USER}:{s.DB_PASS}@{s.DB_HOST}:{s.DB_PORT}/{s.DB_NAME}"
    )
    if s.DB_SSLMODE:
        url += f"?sslmode={s.DB_SSLMODE}"
    return url


COMPLIANCE_DATABASE_URL = build_database_url(settings)
