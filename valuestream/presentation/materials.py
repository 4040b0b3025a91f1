"""Expansion of material node revisions into linked modifications."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from valuestream.models.presentation import MaterialRevision, Modification
from valuestream.models.raw import RawMaterialRevision
from valuestream.presentation.locators import ModificationLocator


def expand_material_revisions(
    fingerprint: str,
    revisions: Iterable[RawMaterialRevision],
    modification_locator: ModificationLocator,
) -> Tuple[MaterialRevision, ...]:
    """Map raw material revisions to presented ones.

    Every modification is linked to the map centred on it, whatever its other
    fields hold.
    """

    return tuple(
        MaterialRevision(
            modifications=tuple(
                Modification(
                    revision=modification.revision,
                    user=modification.user,
                    comment=modification.comment,
                    modified_time=modification.modified_time,
                    locator=modification_locator(
                        fingerprint, modification.revision
                    ),
                )
                for modification in revision.modifications or ()
            )
        )
        for revision in revisions or ()
    )


def material_names_or_none(
    names: Optional[Sequence[str]],
) -> Optional[Tuple[str, ...]]:
    """Return the names as a tuple, or ``None`` when there are none."""
    if not names:
        return None
    return tuple(names)
