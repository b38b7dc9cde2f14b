"""Configuration management for SQLScribe"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from sql_tools.result import DEFAULT_DIALECT

# Load environment variables from root .env
ROOT_DIR = Path(__file__).parent.parent.parent
ENV_PATH = ROOT_DIR / ".env"
load_dotenv(ENV_PATH)

# Model used by the SQL generator agent
DEFAULT_MODEL = "groq:llama-3.1-8b-instant"

# Judge model per scorer
DEFAULT_JUDGE_MODELS: Dict[str, str] = {
    "correctness": "groq:llama-3.1-8b-instant",
    "intentMatch": "grok:grok-beta",
    "readability": "grok:grok-beta",
}

_JUDGE_MODEL_ENV = {
    "correctness": "SQLSCRIBE_CORRECTNESS_JUDGE_MODEL",
    "intentMatch": "SQLSCRIBE_INTENT_JUDGE_MODEL",
    "readability": "SQLSCRIBE_READABILITY_JUDGE_MODEL",
}

_SAMPLING_ENV = {
    "correctness": "SQLSCRIBE_SAMPLING_CORRECTNESS",
    "intentMatch": "SQLSCRIBE_SAMPLING_INTENT_MATCH",
    "readability": "SQLSCRIBE_SAMPLING_READABILITY",
}

# General run configuration
RUN_CONFIG = {
    "judge_timeout": 30,  # seconds
    "log_max_bytes": 10 * 1024 * 1024,  # 10 MB
    "log_backup_count": 5,
}


def get_model() -> str:
    """Model identifier for the SQL generator agent."""
    return os.getenv("SQLSCRIBE_MODEL", DEFAULT_MODEL)


def get_judge_model(scorer: str) -> str:
    """
    Model identifier for the judge of one scorer.

    Args:
        scorer: "correctness", "intentMatch" or "readability"

    Raises:
        KeyError: If the scorer name is unknown
    """
    env_var = _JUDGE_MODEL_ENV[scorer]
    return os.getenv(env_var, DEFAULT_JUDGE_MODELS[scorer])


def get_sampling_rates() -> Dict[str, float]:
    """
    Sampling rate per scorer, clamped to [0, 1].

    Unset or unparseable values fall back to 1.0 (always score).
    """
    rates = {}
    for scorer, env_var in _SAMPLING_ENV.items():
        raw = os.getenv(env_var, "")
        try:
            rate = float(raw) if raw else 1.0
        except ValueError:
            rate = 1.0
        rates[scorer] = max(0.0, min(1.0, rate))
    return rates


def get_logs_dir() -> Path:
    """Directory for log files."""
    return Path(os.getenv("SQLSCRIBE_LOG_DIR", str(ROOT_DIR / "logs")))


def get_log_level() -> str:
    return os.getenv("SQLSCRIBE_LOG_LEVEL", "INFO").upper()
