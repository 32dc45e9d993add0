"""
Repository exceptions
"""


class RepositoryError(Exception):
    """Base class for storage errors of lifecycle entities"""


class ConcurrentModificationError(RepositoryError):
    """
    Stale write rejected by the version check

    The caller read the entity at expected_version, someone else wrote it
    since. The status the caller computed is based on old data and must be
    recomputed from a fresh read.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: int,
        expected_version: int,
        actual_version: int | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        message = f"{entity_type} #{entity_id} changed since version {expected_version}"
        if actual_version is not None:
            message += f" (now at version {actual_version})"
        super().__init__(message + ", reload it and retry the transition")


class EntityNotFoundError(RepositoryError):
    """Lifecycle entity with the given id does not exist"""

    def __init__(self, entity_type: str, entity_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} #{entity_id} not found")
