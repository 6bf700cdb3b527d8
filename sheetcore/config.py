# ==========================================
# CONFIGURATION
# ==========================================
import json
import os
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from sheetcore.errors import ConfigError
from sheetcore.sources import DEFAULT_EXTENSIONS

CONFIG_FILE = "sheetmods.json"


class BuildConfig(BaseModel):
    """Per-project build settings read from sheetmods.json."""
    entry: str = "index"
    extensions: List[str] = list(DEFAULT_EXTENSIONS)
    output: Optional[str] = None


def load_config(directory):
    """Load sheetmods.json from ``directory``; defaults when the file is absent."""
    path = os.path.join(directory, CONFIG_FILE)
    if not os.path.exists(path):
        return BuildConfig()
    try:
        with open(path, "r") as f:
            data = json.load(f)
        return BuildConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"invalid {CONFIG_FILE}: {e}") from e
