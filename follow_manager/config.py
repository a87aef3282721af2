import os
from dataclasses import dataclass

DEFAULT_REMOTE_TIMEOUT = 30.0

@dataclass(frozen=True)
class Settings:
    token: str
    data_dir: str = "follow_data"
    # Empty disables /analyze_session
    remote_url: str = ""
    remote_timeout: float = DEFAULT_REMOTE_TIMEOUT
    language: str = "en"
    # Set to True to sync commands per guild for faster propagation
    sync_per_guild: bool = True
    log_level: str = "INFO"

def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default

def load_settings() -> Settings:
    token = os.getenv("DISCORD_BOT_TOKEN", "").strip()
    return Settings(
        token=token or "",
        data_dir=os.getenv("FOLLOW_DATA_DIR", "").strip() or "follow_data",
        remote_url=os.getenv("FOLLOW_REMOTE_URL", "").strip(),
        remote_timeout=_float_env("FOLLOW_REMOTE_TIMEOUT", DEFAULT_REMOTE_TIMEOUT),
        language=os.getenv("FOLLOW_LANGUAGE", "").strip().lower() or "en",
        log_level=os.getenv("FOLLOW_LOG_LEVEL", "").strip().upper() or "INFO",
    )
