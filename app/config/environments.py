import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SESSION_EXPIRE_TIME = 60 * 60 * 6  # 6 Hour
DEFAULT_PORT = 8080
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "INFO"

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY environment variable is missing! Set it in your .env file.")

SESSION_EXPIRE_TIME = int(os.getenv("SESSION_EXPIRE_TIME", DEFAULT_SESSION_EXPIRE_TIME))
PORT = int(os.getenv("PORT", DEFAULT_PORT))
ENVIRONMENT = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT)
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

COOKIE_SECURE = ENVIRONMENT == "production"
COOKIE_SAMESITE = "none" if COOKIE_SECURE else "lax"

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is missing! Set it in your .env file.")
DB_AUTO_CREATE = os.getenv("DB_AUTO_CREATE", "true").lower() == "true"

SUPABASE_PROJECT_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
if not all([SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY]):
    raise RuntimeError("SUPABASE related environment variable is missing! Set it in your .env file.")

MEDIA_IMAGE_BUCKET = os.getenv("MEDIA_IMAGE_BUCKET", "images")
MEDIA_VIDEO_BUCKET = os.getenv("MEDIA_VIDEO_BUCKET", "videos")
MEDIA_ROOT_FOLDER = os.getenv("MEDIA_ROOT_FOLDER", "videohub")
