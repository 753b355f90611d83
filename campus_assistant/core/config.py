"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root (where data/ lives)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent

# API server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "4000").strip() or "4000")

# Campus SQLite store
CAMPUS_DB_PATH: Path = Path(
    os.getenv("CAMPUS_DB_PATH", "").strip() or PROJECT_ROOT / "data" / "campus.db"
)
# Load seed rows when the store is empty at startup
SEED_ON_START: bool = os.getenv("SEED_ON_START", "true").strip().lower() not in {"0", "false", "no"}

# Records per collection included in a reply summary
SUMMARY_MAX_RECORDS: int = 3

# LLM augmentation. Disabled unless one of the API keys is set.
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_LLM_MODEL: str = (
    os.getenv("OPENAI_LLM_MODEL", "gpt-4o-mini").strip() or "gpt-4o-mini"
)

# Hugging Face router (used when OPENAI_API_KEY is not set)
HF_API_KEY: str = os.getenv("HF_API_KEY", "").strip()
HF_CHAT_URL: str = "https://router.huggingface.co/v1/chat/completions"
HF_LLM_MODEL: str = (
    os.getenv("HF_LLM_MODEL", "meta-llama/Llama-3.2-3B-Instruct").strip()
    or "meta-llama/Llama-3.2-3B-Instruct"
)

# API timeouts (seconds)
LLM_API_TIMEOUT: float = float(os.getenv("LLM_API_TIMEOUT", "30").strip() or "30")
LLM_MAX_TOKENS: int = 400

# Chat client (Streamlit UI)
API_BASE: str = os.getenv("API_BASE", "http://localhost:4000").strip() or "http://localhost:4000"
CLIENT_TIMEOUT: float = 90.0
