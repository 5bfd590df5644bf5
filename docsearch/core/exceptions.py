class SearchServiceError(Exception):
    """Base class for errors raised by the search services."""


class InvalidInput(SearchServiceError):
    """A query or document was missing required text."""


class NotFound(SearchServiceError):
    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with ID {identifier} not found")
