"""
Filesystem adapters: raw file reads and the directory-backed LogoResolver.
"""
from pathlib import Path
from typing import Optional

from sysfetch.internal import paths
from sysfetch.internal.constants import LOGO_READ_ERROR
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.contracts import FileReader, LogoAsset, LogoResolver


class LocalFileReader(FileReader):
    def read_file(self, path: Path) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except FileNotFoundError:
            return None


class FileSystemLogoResolver(LogoResolver):
    """
    Resolves logos from a directory of '<distro id>.txt' files, with
    'unknown.txt' as the mandatory fallback.
    """
    def __init__(self, logo_dir: Path, reader: Optional[FileReader] = None):
        self.logger = get_logger(self.__class__.__name__)
        self._logo_dir = Path(logo_dir)
        self._reader = reader or LocalFileReader()

    @property
    def logo_dir(self) -> Path:
        return self._logo_dir

    def resolve(self, distro_id: str) -> LogoAsset:
        location = paths.get_logo_path(self._logo_dir, distro_id)
        is_fallback = False
        try:
            data = self._reader.read_file(location)
            if data is None:
                self.logger.info("No logo for distribution, using fallback", distro=distro_id)
                location = paths.get_fallback_logo_path(self._logo_dir)
                is_fallback = True
                data = self._reader.read_file(location)
            if data is None:
                raise FileNotFoundError(location)
            text = data.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Could not read logo", path=str(location), error=str(e))
            return LogoAsset(distro_id=distro_id, text=LOGO_READ_ERROR, location=None, is_fallback=is_fallback)

        return LogoAsset(distro_id=distro_id, text=text, location=location, is_fallback=is_fallback)

    def list_available(self) -> list[str]:
        """Distribution ids that have a dedicated logo."""
        if not self._logo_dir.is_dir():
            return []
        fallback = paths.get_fallback_logo_path(self._logo_dir)
        return sorted(
            p.stem for p in self._logo_dir.glob("*.txt")
            if p.is_file() and p != fallback
        )
