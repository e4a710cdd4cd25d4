from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

ROLL_NO_FIELD = "rollNo"


def is_roll_no(value: Any) -> bool:
    # bool is an int subclass, but `true` is not a roll number.
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class StudentRecord:
    """One registered student.

    Notes:
    - `roll_no` is the only field the registry looks at.
    - Everything else the caller sent (name, class, marks, ...) lives in `fields`
      and is handed back untouched, including the position `rollNo` had among them.
    - `fields` is deep-copied into a read-only mapping, and `to_dict()` hands out a
      fresh deep copy, so a stored record cannot be mutated through a reference
      the caller kept or received.
    """

    roll_no: int
    fields: Mapping[str, Any] = field(default_factory=dict)
    roll_no_position: int = field(default=0, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not is_roll_no(self.roll_no):
            raise ValueError(f"roll_no must be an integer, got {self.roll_no!r}")
        extra = copy.deepcopy(dict(self.fields))
        if ROLL_NO_FIELD in extra:
            raise ValueError(f"fields cannot contain {ROLL_NO_FIELD!r}; pass it as roll_no")
        position = min(max(int(self.roll_no_position), 0), len(extra))
        object.__setattr__(self, "fields", MappingProxyType(extra))
        object.__setattr__(self, "roll_no_position", position)

    @property
    def name(self) -> Any:
        return self.fields.get("name")

    def to_dict(self) -> dict[str, Any]:
        items = list(copy.deepcopy(dict(self.fields)).items())
        items.insert(self.roll_no_position, (ROLL_NO_FIELD, int(self.roll_no)))
        return dict(items)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StudentRecord:
        if ROLL_NO_FIELD not in data:
            raise ValueError(f"Missing field: {ROLL_NO_FIELD}")
        roll_no = data[ROLL_NO_FIELD]
        if not is_roll_no(roll_no):
            raise ValueError(f"{ROLL_NO_FIELD} must be an integer")
        keys = list(data)
        return cls(
            roll_no=roll_no,
            fields={k: v for k, v in data.items() if k != ROLL_NO_FIELD},
            roll_no_position=keys.index(ROLL_NO_FIELD),
        )
