"""Annotation visitor: ParsedClass -> greylist entries.

Stateless between visit() calls. Each class processed independently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from class2greylist.domain.model.greylist_entry import GreylistEntry

if TYPE_CHECKING:
    from collections.abc import Set

    from class2greylist.application.status import Status
    from class2greylist.domain.model.member import Member
    from class2greylist.domain.model.parsed_class import ParsedClass
    from class2greylist.domain.ports.consumer import GreylistConsumerProtocol

MAX_TARGET_SDK = "maxTargetSdk"
EXPECTED_SIGNATURE = "expectedSignature"


class AnnotationVisitor:
    """Finds members carrying the target annotation and forwards their signatures.

    For each annotated member:
        - signature in public API list: skipped (bridge method duplicates)
        - maxTargetSdk outside allowed values: error reported, entry still forwarded
        - expectedSignature mismatch on a non-bridge member: error reported
    """

    def __init__(
        self,
        annotation_type: str,
        public_apis: Set[str],
        allowed_sdk_versions: Set[int | None],
        consumer: GreylistConsumerProtocol,
        status: Status,
    ) -> None:
        """Initialize visitor.

        Args:
            annotation_type: Annotation descriptor to look for
            public_apis: Signatures never written to the greylist
            allowed_sdk_versions: Valid maxTargetSdk values (None = not set)
            consumer: Destination of greylist entries
            status: Run status
        """
        if not annotation_type:
            raise ValueError("annotation_type must not be empty")

        self._annotation_type = annotation_type
        self._public_apis = public_apis
        self._allowed_sdk_versions = allowed_sdk_versions
        self._consumer = consumer
        self._status = status

    def visit(self, parsed_class: ParsedClass) -> None:
        """Visit fields and methods of one class, in class file order."""
        self._status.debug("Visit class %s", parsed_class.name)
        for member in parsed_class.members:
            self._visit_member(parsed_class, member)

    def _visit_member(self, parsed_class: ParsedClass, member: Member) -> None:
        self._status.debug("Visit member %s : %s", member.name, member.descriptor)
        annotation = member.find_annotation(self._annotation_type)
        if annotation is None:
            return
        self._status.debug("Member has annotation %s", self._annotation_type)
        if member.is_bridge:
            self._status.debug("Member is a bridge")

        signature = member.signature(parsed_class.descriptor)

        expected = annotation.get(EXPECTED_SIGNATURE)
        # Bridge methods are generated, their signature never matches
        if expected is not None and not member.is_bridge and expected != signature:
            self._error(
                parsed_class,
                member,
                "Expected signature does not match generated:\nExpected:  %s\nGenerated: %s",
                expected,
                signature,
            )

        max_target_sdk = annotation.get(MAX_TARGET_SDK)
        if max_target_sdk is not None and (
            isinstance(max_target_sdk, bool) or not isinstance(max_target_sdk, int)
        ):
            self._error(
                parsed_class,
                member,
                "Invalid value for %s: expected an int, got %r",
                MAX_TARGET_SDK,
                max_target_sdk,
            )
            return

        if signature in self._public_apis:
            self._status.debug("Not reporting %s as it's in the public API", signature)
            return

        if max_target_sdk not in self._allowed_sdk_versions:
            self._error(
                parsed_class,
                member,
                "Invalid value for %s: got %s, expected one of [%s]",
                MAX_TARGET_SDK,
                max_target_sdk,
                ", ".join(str(v) for v in _sorted_versions(self._allowed_sdk_versions)),
            )

        self._consumer.accept(GreylistEntry(signature=signature, max_target_sdk=max_target_sdk))

    def _error(
        self,
        parsed_class: ParsedClass,
        member: Member,
        message: str,
        *args: object,
    ) -> None:
        """Report error prefixed with source file and member name."""
        self._status.error(
            "%s: %s: " + message,
            parsed_class.display_name,
            member.name,
            *args,
        )


def _sorted_versions(versions: Set[int | None]) -> list[int | None]:
    """None first, then ascending."""
    return sorted(versions, key=lambda v: (v is not None, v or 0))
