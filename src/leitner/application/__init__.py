# Application Package
from .buckets import get_bucket_range, to_bucket_sets, validate_bucket_numbers
from .config import LeitnerConfig, configure_logging, resolve_config
from .hints import get_hint, mask_text
from .progress import ProgressReport, StageProgress, compute_progress
from .scheduler import is_bucket_due, next_bucket, practice, update
from .service import LeitnerService

__all__ = [
    "to_bucket_sets",
    "get_bucket_range",
    "validate_bucket_numbers",
    "practice",
    "update",
    "next_bucket",
    "is_bucket_due",
    "get_hint",
    "mask_text",
    "compute_progress",
    "ProgressReport",
    "StageProgress",
    "LeitnerConfig",
    "resolve_config",
    "configure_logging",
    "LeitnerService",
]
