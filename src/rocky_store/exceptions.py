"""Exception hierarchy for rocky-store."""


class RockyError(Exception):
    """Base exception for all rocky-store errors."""


class PersistenceError(RockyError):
    """Raised when reading or writing the primary data file fails."""


class DocumentEncodeError(PersistenceError):
    """Raised when a document cannot be serialized to JSON."""


class BackupError(RockyError):
    """Raised when a backup snapshot cannot be taken.

    Only used inside the backup scheduler; never escapes a save.
    """
