import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    BLOGS_COLLECTION = "blogs"
    USERS_COLLECTION = "users"
    JSON_INDENT = int(os.getenv("JSON_INDENT", "4"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")


class DevConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
