import os

# ---------- CONFIG ----------
APP_TITLE = os.getenv("APP_TITLE", "Learning FastAPI")
APP_VERSION = os.getenv("APP_VERSION", "1.0")
APP_DESCRIPTION = "Runnable chapters: routing, parameters, bodies, validation, nested models, cookies and headers."

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./learning.db")

SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_THIS_TO_A_STRONG_SECRET_IN_PROD")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# expected value of the x-key header on /headers/required/
API_KEY = os.getenv("API_KEY", "fake-super-secret-key")
