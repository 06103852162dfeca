import os
import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from typing import Optional

load_dotenv()

CONFIG_ENV_VAR = "CONNECT4_CONFIG"

class EngineConfig(BaseModel):
    # --- Search ---
    # 6 plies keeps a CPU move well under a second in pure Python
    depth: int = Field(default=6, ge=0)

    # --- Scoring System ---
    # Forced results score (win_score + remaining depth) so faster wins rank higher
    win_score: int = Field(default=100000, gt=0)
    center_weight: int = Field(default=3, ge=0)
    adjacent_weight: int = Field(default=2, ge=0)
    two_weight: int = Field(default=10, ge=0)
    three_weight: int = Field(default=50, ge=0)

    # --- Pacing (consumed by front-ends, not by the search) ---
    cpu_delay_ms: int = Field(default=500, ge=0)
    turn_time_limit: int = Field(default=30, gt=0)

DEFAULT_CONFIG = EngineConfig()

def load_config(path: Optional[str] = None) -> EngineConfig:
    """
    Loads engine settings from a YAML file with a top-level `engine:` mapping.
    Falls back to the CONNECT4_CONFIG environment variable, then to defaults.
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return EngineConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return EngineConfig(**(data.get("engine") or {}))
