import json
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    NO_VALUE_MESSAGE: str = Field(
        default="No value found",
        description="Left value produced when an empty Option is turned into an Either.",
    )
    CONFIG_PATH: Optional[Path] = None

    @classmethod
    def load(cls) -> "Settings":
        values = {"LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO")}

        config_path = os.getenv("CATEGORICA_CONFIG")
        if config_path:
            path = Path(config_path).expanduser()
            if not path.exists():
                raise FileNotFoundError(f"Categorica config file not found at {path}")

            with open(path, "r") as f:
                values.update(json.load(f))
            values["CONFIG_PATH"] = path

        return cls(**values)


settings = Settings.load()
