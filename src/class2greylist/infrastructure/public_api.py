"""Public API list loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from class2greylist.domain.exceptions import PublicApiListError

if TYPE_CHECKING:
    from pathlib import Path


def load_public_api_list(path: Path) -> frozenset[str]:
    """Read public API signatures, one per line.

    Lines are stripped; blank lines are ignored.

    Args:
        path: Text file, UTF-8

    Returns:
        Frozen set of signatures

    Raises:
        PublicApiListError: File cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise PublicApiListError(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise PublicApiListError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise PublicApiListError(path, e.strerror or str(e)) from e

    return frozenset(stripped for line in text.splitlines() if (stripped := line.strip()))
