"""Domain layer errors.

Store failures are not wrapped here: ``pymongo.errors.PyMongoError`` and its
subclasses reach callers unchanged.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PartialNotFoundError(NotFoundError):
    """Raised when a batch lookup resolves only some of its identifiers.

    ``found_ids`` lists the identifiers that did resolve, so callers can
    render partial results or report exactly what is missing.
    """

    def __init__(self, resource: str, requested_ids: list[str], found_ids: list[str]):
        self.requested_ids = requested_ids
        self.found_ids = found_ids
        found = set(found_ids)
        missing = [i for i in requested_ids if i not in found]
        super().__init__(resource, ", ".join(missing))


class CorruptRecordError(DomainError):
    """Raised when a stored record cannot be mapped to a domain model."""

    def __init__(self, resource: str, identifier: str, reason: str):
        self.resource = resource
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Corrupt {resource} record {identifier}: {reason}")
