import uuid

from ...domain.ports import IdentifierSource


class UUIDIdentifierSource(IdentifierSource):
    """Random (version 4) UUIDs in their canonical string form."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
