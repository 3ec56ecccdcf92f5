"""
Project root resolution.

Walks up from a starting directory until one containing the marker file
(the project's build manifest) is found.
"""

import os

from api_config.errors import RootPathNotFoundError

DEFAULT_MARKER = "pyproject.toml"


class RootPathResolver:
    """Locate the project root directory by its marker file."""

    def __init__(self, marker: str = DEFAULT_MARKER):
        self.marker = marker

    def resolve(self, path: str) -> str:
        """Return the closest ancestor of ``path`` (inclusive) holding the marker."""
        if not path:
            raise RootPathNotFoundError("directory path is not set")

        base_path = os.path.normpath(os.path.abspath(path))
        if not os.path.exists(base_path):
            raise RootPathNotFoundError(
                f"could not find app root directory; {base_path} does not exist"
            )

        return self._find_root_dir(base_path)

    def _find_root_dir(self, directory: str) -> str:
        while True:
            if os.path.isfile(os.path.join(directory, self.marker)):
                return directory

            parent = os.path.dirname(directory)
            if parent == directory:
                break
            directory = parent

        raise RootPathNotFoundError(
            f"could not find app root directory; {self.marker} not found"
        )
