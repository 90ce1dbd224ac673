from pathlib import Path

from assetry.base import (
    get_resource_root,
    log,
)
from assetry.errors import ManifestReadError


class ManifestReader:
    """
    Reads manifest files: plain text files with one asset identifier per line. Blank lines are ignored.
    Paths are relative to the resource root.
    """

    def __init__(self, root=None):
        self.root = Path(root if root is not None else get_resource_root())

    def __repr__(self):
        return f'<{type(self).__name__} {self.root}>'

    def path(self, location):
        return self.root / location.lstrip('/')

    def read(self, location):
        filename = self.path(location)
        try:
            content = filename.read_text(encoding='utf8')
        except FileNotFoundError:
            raise ManifestReadError(location, f'{filename} does not exist') from None
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(location, str(e)) from e

        identifiers = [line.strip() for line in content.splitlines() if line.strip()]
        log.debug('Read %s identifiers from manifest %s', len(identifiers), filename)
        return identifiers
