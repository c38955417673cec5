from uuid import uuid4


def new_id() -> str:
    """Opaque random identifier for players, groups and matches."""
    return str(uuid4())
