"""Greylist entry value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GreylistEntry:
    """Signature flagged for restricted access.

    Transient: produced per annotated member, consumed by a greylist consumer.

    Attributes:
        signature: Dex-style member signature
        max_target_sdk: maxTargetSdk annotation element, None if not set
    """

    signature: str
    max_target_sdk: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.signature:
            raise ValueError("signature must not be empty")
