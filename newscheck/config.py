import os
from dotenv import load_dotenv

# Resolve absolute path to the project-level .env
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Load .env (absolute path ensures it works from any working directory)
load_dotenv(ENV_PATH)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class Config:
    OPENAI_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TIMEOUT = _float_env("OPENAI_TIMEOUT", 30.0)

    # heuristic | remote | auto
    CLASSIFIER = (os.getenv("CLASSIFIER") or "heuristic").strip().lower()

    LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()
    ALLOWED_ORIGINS = [o.strip() for o in (os.getenv("ALLOWED_ORIGINS") or "*").split(",") if o.strip()]
