# uxlink/core/config.py
from pydantic import BaseModel
import os

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "y"}


class Settings(BaseModel):
    app_name: str = "UXLink Layer Export"
    environment: str = os.getenv("UXLINK_ENV", "dev")
    log_level: str = os.getenv("UXLINK_LOG_LEVEL", "INFO")

    # snapshot used as the "current document" by the message endpoint
    document_path: str = os.getenv("UXLINK_DOCUMENT_PATH", "")

    # when true, a node that fails unexpectedly yields an error-marked record
    # instead of aborting the whole extraction
    isolate_node_failures: bool = _env_flag("UXLINK_ISOLATE_NODE_FAILURES")

    @property
    def document_configured(self) -> bool:
        return bool(self.document_path.strip())


settings = Settings()
