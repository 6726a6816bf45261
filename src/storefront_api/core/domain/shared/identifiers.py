from uuid import uuid4


def new_id() -> str:
    """Application-generated primary key for every stored document."""
    return str(uuid4())
