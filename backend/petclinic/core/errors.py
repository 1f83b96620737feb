"""Module: errors."""


class PetClinicError(Exception):
    """Base class for failures raised by request handlers."""


class ResourceNotFoundError(PetClinicError):
    """A path-identified owner, pet or vet does not exist."""

    def __init__(self, resource: str, resource_id: int):
        super().__init__(f"{resource} not found with id: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id
