"""Insight domain models."""

from dataclasses import dataclass
from enum import Enum


class InsightType(str, Enum):
    """Severity of an insight."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class InsightCategory(str, Enum):
    """What an insight is about."""

    EXCESS = "excess"
    DEFICIENCY = "deficiency"
    REDUNDANCY = "redundancy"
    GOOD = "good"
    INTERACTION = "interaction"


class InteractionKind(str, Enum):
    """How two nutrients affect each other."""

    INHIBITS = "inhibits"
    ENHANCES = "enhances"
    CAUTION = "caution"


@dataclass(frozen=True)
class Insight:
    """Human-readable finding derived from aggregated nutrients."""

    type: InsightType
    category: InsightCategory
    message: str
    nutrient: str | None = None
    details: str | None = None


@dataclass(frozen=True)
class InteractionRule:
    """Known interaction between two canonical nutrients."""

    nutrients: tuple[str, str]
    kind: InteractionKind
    description: str
