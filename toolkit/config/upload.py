"""
Upload Configuration

Per-engine upload limits, passed explicitly to each UploadEngine.
"""
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping

DEFAULT_MAX_UPLOAD_SIZE = 1024 * 1024 * 1024  # 1GB


@dataclass(frozen=True)
class UploadConfig:
    """
    Limits applied to a single upload call.

    Attributes:
        max_upload_size: Ceiling for the whole request body, in bytes
        allowed_types: Accepted MIME types; empty means any type
        cleanup_on_error: Delete files written earlier in a call that fails
    """

    max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE
    allowed_types: FrozenSet[str] = field(default_factory=frozenset)
    cleanup_on_error: bool = False

    def __post_init__(self):
        if self.max_upload_size <= 0:
            raise ValueError(f"max_upload_size must be positive, got {self.max_upload_size}")
        object.__setattr__(self, 'allowed_types', _normalize_types(self.allowed_types))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'UploadConfig':
        """
        Build from a Flask config (or any mapping) using the
        MAX_UPLOAD_SIZE, ALLOWED_TYPES and UPLOAD_CLEANUP_ON_ERROR keys.
        """
        allowed = mapping.get('ALLOWED_TYPES') or ()
        if isinstance(allowed, str):
            allowed = allowed.split(',')
        return cls(
            max_upload_size=int(mapping.get('MAX_UPLOAD_SIZE', DEFAULT_MAX_UPLOAD_SIZE)),
            allowed_types=allowed,
            cleanup_on_error=bool(mapping.get('UPLOAD_CLEANUP_ON_ERROR', False)),
        )


def _normalize_types(types: Iterable[str]) -> FrozenSet[str]:
    return frozenset(t.strip().lower() for t in types if t and t.strip())
