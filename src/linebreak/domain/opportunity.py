"""Break opportunity records.

This module defines the values handed to callers: each opportunity marks
where a new line may (or must) start and carries the slice of text it ends.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BreakPoint:
    """A break found by the engine, before the segment text is attached.

    Attributes:
        offset: Index in the text where the next line starts
        mandatory: True for a forced newline
    """

    offset: int
    mandatory: bool = False


@dataclass(frozen=True)
class Opportunity:
    """A line-break opportunity in a text.

    Joining the segments of every opportunity of a text in order reproduces
    the text exactly.

    Attributes:
        offset: Index in the text where the next line starts
        mandatory: True if the break must be taken (hard line break)
        segment: Text from the previous opportunity's offset up to this one
    """

    offset: int
    mandatory: bool
    segment: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the opportunity
        """
        return {
            "offset": self.offset,
            "mandatory": self.mandatory,
            "segment": self.segment,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Opportunity":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of the opportunity

        Returns:
            Opportunity instance
        """
        return cls(
            offset=data["offset"],
            mandatory=data["mandatory"],
            segment=data["segment"],
        )
