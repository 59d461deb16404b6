"""Zone-split document models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from docoutline.schemas.nodes import Node


class Zone(str, Enum):
    """Front, middle or back matter."""

    FRONT = "front"
    MIDDLE = "middle"
    BACK = "back"


class DocumentStructure(BaseModel):
    """A document explicitly split into front, middle and back regions.

    Attributes:
        front: Front matter blocks (cover, abstract, preface...).
        middle: Main content blocks. Only headings here are numbered.
        back: Back matter blocks (references, appendices...).
    """

    model_config = ConfigDict(frozen=True)

    front: tuple[Node, ...] = ()
    middle: tuple[Node, ...] = ()
    back: tuple[Node, ...] = ()

    def region(self, zone: Zone) -> tuple[Node, ...]:
        return getattr(self, zone.value)
