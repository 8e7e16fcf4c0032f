from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Optional, Union

PART_FILE = "part-00000"
SUCCESS_MARKER = "_SUCCESS"


class FileSystemStorageBackend:
    """Local filesystem StorageBackend.

    Layout of a written blob:
      <path>/
        part-00000     # the text record, newline terminated
        _SUCCESS       # empty marker, written last

    Notes
    -----
    - ``write_blob`` refuses an existing target, so writes never merge with
      stale content.
    - Not safe for concurrent writers to the same path.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        # Relative paths resolve against the working directory when base_dir is None.
        self.base_dir = Path(base_dir).expanduser() if base_dir is not None else None

    def _resolve(self, path: str) -> Path:
        p = Path(path).expanduser()
        if self.base_dir is not None and not p.is_absolute():
            p = self.base_dir / p
        return p

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def delete_recursive(self, path: str) -> None:
        p = self._resolve(path)
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        elif p.exists() or p.is_symlink():
            p.unlink()

    def write_blob(self, path: str, text: str) -> None:
        target = self._resolve(path)
        if target.exists():
            raise FileExistsError(f"Output path {target} already exists")
        target.mkdir(parents=True)
        with (target / PART_FILE).open("w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
        (target / SUCCESS_MARKER).touch()

    def read_first_blob(self, path: str) -> str:
        target = self._resolve(path)
        if not target.exists():
            raise FileNotFoundError(f"No data found at {target}")

        files: List[Path]
        if target.is_dir():
            files = sorted(p for p in target.iterdir() if p.is_file() and p.name.startswith("part-"))
        else:
            files = [target]

        for f in files:
            with f.open("r", encoding="utf-8") as fh:
                for line in fh:
                    line = line.rstrip("\r\n")
                    if line:
                        return line
        raise FileNotFoundError(f"No records found at {target}")

    def __repr__(self) -> str:
        return f"FileSystemStorageBackend(base_dir={str(self.base_dir) if self.base_dir else None!r})"
