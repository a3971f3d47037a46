"""Environment variable loading for the quote engine and its callers.

Operators override pricing constants and the reference data path through
a ``.env`` file; this module is the one place that reads it.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_environment_variables(project_dir: Optional[Path] = None) -> bool:
    """Load environment variables from a .env file.

    Checks the project directory first, then its parent (for checkouts that
    keep one shared .env above several projects). Variables already present
    in the environment are not overwritten.

    Args:
        project_dir: Project root directory. If None, derived from this file.

    Returns:
        True if a .env file was found and loaded, False otherwise
    """
    if project_dir is None:
        # src/config/env_loader.py -> project root
        project_dir = Path(__file__).parent.parent.parent

    for env_file in (project_dir / ".env", project_dir.parent / ".env"):
        if env_file.exists():
            return load_dotenv(env_file, override=False)
    return False
