# backend/config.py
import os
from dotenv import load_dotenv

# --- 환경 변수 로드 ---
load_dotenv()

JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "2"))
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:8501")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///" + os.path.join("data", "adgen.db"))

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
ADCOPY_MODEL = os.getenv("ADCOPY_MODEL", "gpt-4o-mini")
ADCOPY_TEMPERATURE = float(os.getenv("ADCOPY_TEMPERATURE", "0.8"))

# comma separated, "*" = any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
HAS_GOOGLE = bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
