"""Environment variables loader."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"


def running_in_aws() -> bool:
    """Whether the process runs inside Lambda or ECS."""
    return bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME") or os.getenv("ECS_CONTAINER_METADATA_URI"))


def load_env_file(env_path: Optional[Path] = None) -> bool:
    """
    Load credentials and client settings from a .env file.
    
    Variables already present in the environment win over the file.
    Inside Lambda or ECS the runtime provides the environment and no
    file is read.
    
    Args:
        env_path: File to read. If None, uses the project .env or searches upwards from cwd.
        
    Returns:
        True if a file was found and loaded
    """
    if running_in_aws():
        return False
    
    if env_path is None and PROJECT_ENV_FILE.exists():
        env_path = PROJECT_ENV_FILE
    return load_dotenv(env_path, override=False)
