"""
Clinical Decision Layer — Base Types

Defines the case descriptor collected after TURBT and the risk categories that
the classification, treatment and surveillance modules exchange.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from urostrat.utils.exceptions import InvalidArgumentError

E = TypeVar("E", bound=Enum)


class RiskCategory(str, Enum):
    """
    Recurrence / progression risk tier of a non-muscle-invasive bladder tumour.

    The value doubles as the display label used in exports.
    """
    LOW          = "Low Risk"
    INTERMEDIATE = "Intermediate Risk"
    HIGH         = "High Risk"


class Grade(str, Enum):
    LOW  = "low"
    HIGH = "high"


class Stage(str, Enum):
    TA  = "Ta"
    T1  = "T1"
    CIS = "CIS"


class TumourSize(str, Enum):
    UNDER_3CM = "<3cm"
    OVER_3CM  = ">3cm"


class TumourCount(str, Enum):
    SINGLE   = "single"
    MULTIPLE = "multiple"


class Answer(str, Enum):
    YES = "yes"
    NO  = "no"


def _coerce(enum_cls: Type[E], name: str, value: Any) -> Optional[E]:
    """Map a raw form value onto `enum_cls`. Empty / missing → None."""
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [m.value for m in enum_cls]
        raise InvalidArgumentError(
            f"Invalid value {value!r} for {name}; expected one of {allowed}",
            argument=name,
            details={"value": value, "allowed": allowed},
        ) from None


@dataclass(frozen=True)
class CaseDescriptor:
    """
    Tumour characteristics selected by the clinician.

    Every field is optional; an unset field simply fails to satisfy any rule
    that tests it.  `stage` is recorded but takes no part in classification.
    """
    grade: Optional[Grade] = None
    stage: Optional[Stage] = None
    size: Optional[TumourSize] = None
    number: Optional[TumourCount] = None
    recurrence: Optional[Answer] = None
    cis: Optional[Answer] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "CaseDescriptor":
        """
        Build a descriptor from raw form selections, e.g.
        {"grade": "low", "size": "<3cm", "cis": ""}.

        Raises:
            InvalidArgumentError: a non-empty value is outside its enumerated set.
        """
        return cls(
            grade=_coerce(Grade, "grade", form.get("grade")),
            stage=_coerce(Stage, "stage", form.get("stage")),
            size=_coerce(TumourSize, "size", form.get("size")),
            number=_coerce(TumourCount, "number", form.get("number")),
            recurrence=_coerce(Answer, "recurrence", form.get("recurrence")),
            cis=_coerce(Answer, "cis", form.get("cis")),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            f.name: (getattr(self, f.name).value if getattr(self, f.name) is not None else None)
            for f in fields(self)
        }


@dataclass(frozen=True)
class Classification:
    """A risk category plus the case attributes that produced it."""
    category: RiskCategory
    triggering_factors: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "triggering_factors": list(self.triggering_factors),
        }
