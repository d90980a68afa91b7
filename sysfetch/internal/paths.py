import os
from pathlib import Path
from typing import Optional

from sysfetch.internal.constants import ENV_LOGO_DIR, FALLBACK_LOGO_NAME, LOGO_SUFFIX


# ---------------------------------------------------------------------
# Logo resources
# ---------------------------------------------------------------------

def get_bundled_logo_dir() -> Path:
    """
    Directory of the logos shipped inside the package.
    """
    return Path(__file__).resolve().parent.parent / "logo"


def get_logo_dir(override: Optional[Path] = None) -> Path:
    """
    Returns the logo directory.

    - explicit override (the --logo-dir option)
    - SYSFETCH_LOGO_DIR environment variable
    - the bundled sysfetch/logo directory
    """
    if override is not None:
        return Path(override)
    env = os.environ.get(ENV_LOGO_DIR)
    if env:
        return Path(env)
    return get_bundled_logo_dir()


def get_logo_path(logo_dir: Path, name: str) -> Path:
    return logo_dir / f"{name}{LOGO_SUFFIX}"


def get_fallback_logo_path(logo_dir: Path) -> Path:
    return get_logo_path(logo_dir, FALLBACK_LOGO_NAME)


if __name__ == "__main__":
    print("Bundled Logo Dir:", get_bundled_logo_dir())
    print("Logo Dir:", get_logo_dir())
    print("Fallback Logo:", get_fallback_logo_path(get_logo_dir()))
