"""Draw words on a contribution graph with backdated empty commits."""

from .errors import (
    CommitArtError,
    ExternalOperationFailure,
    InvalidInput,
    MissingIdentity,
    UnknownGlyph,
    WidthExceeded,
)
from .matrix import build_matrix
from .dates import compute_optimal_anchor, next_anchor_weekday, normalize_to_anchor_weekday
from .planner import CommitDescriptor, Plan, plan_commits, plan_word

__version__ = "0.1.0"
