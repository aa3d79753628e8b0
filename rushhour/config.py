import os
from dotenv import load_dotenv

load_dotenv()

def _int(name: str, default: int) -> int:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"Env var {name} must be an integer, got {v!r}") from None

def _float(name: str, default: float) -> float:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return float(v)
    except ValueError:
        raise RuntimeError(f"Env var {name} must be a number, got {v!r}") from None

def max_nodes() -> int:
    """Node-expansion budget for a single search."""
    return _int("RH_MAX_NODES", 200_000)

def playback_delay() -> float:
    """Seconds between frames when replaying a solution."""
    return _float("RH_PLAYBACK_DELAY", 0.5)

def log_level() -> str:
    return os.getenv("RH_LOG_LEVEL", "INFO").upper()
