"""Domain errors raised by the service layer."""


class NotFoundError(ValueError):
    """Raised when an operation references an identifier that is not stored.

    Subclasses ``ValueError`` so handlers that already translate value
    errors into HTTP 404 responses keep working.
    """

    def __init__(self, entity: str, record_id: int) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with ID {record_id} not found")
