"""Errors raised while converting a legacy event into a CloudEvent."""


class LegacyEventError(ValueError):
    """Base class for payloads that cannot be converted."""


class MalformedContextError(LegacyEventError):
    """Raised when a mandatory context field is missing or has the wrong type."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class ResourcePatternError(LegacyEventError):
    """Base class for resource strings that cannot be split into resource and subject."""

    def __init__(self, message, service, resource):
        super().__init__(f"{message}: service={service}, resource={resource}")
        self.service = service
        self.resource = resource


class ResourcePatternMismatchError(ResourcePatternError):
    """Raised when a known service's resource string does not match its pattern."""

    def __init__(self, service, resource):
        super().__init__("Resource regex did not match", service, resource)


class ResourcePatternExecutionError(ResourcePatternError):
    """Raised when the regex engine fails while matching a resource string."""

    def __init__(self, service, resource):
        super().__init__("Failed while matching resource regex", service, resource)
