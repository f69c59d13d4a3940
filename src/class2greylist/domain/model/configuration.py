"""Run configuration built from the command line.

Parsed once at start, immutable thereafter.
None = option not given.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from class2greylist.domain.exceptions import NoInputArchivesError


@dataclass(frozen=True, slots=True)
class Configuration:
    """Configuration of one class2greylist run.

    Attributes:
        archives: Input jar files, processed in order. Must not be empty.
        public_api_list: Public API list file used to de-dupe bridge methods.
        write_greylist: Output specs ("path" or "int:path") in command line order.
            None = print greylist to stdout.
        debug: Print debug messages.
    """

    archives: tuple[Path, ...]
    public_api_list: Path | None = None
    write_greylist: tuple[str, ...] | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.archives:
            raise NoInputArchivesError
        object.__setattr__(self, "archives", tuple(Path(a) for a in self.archives))
        if self.public_api_list is not None:
            object.__setattr__(self, "public_api_list", Path(self.public_api_list))
        if self.write_greylist is not None:
            object.__setattr__(self, "write_greylist", tuple(self.write_greylist))
