"""Value objects at the boundary of the legacy event mapper."""
from dataclasses import dataclass
from typing import Any, Optional

from .errors import MalformedContextError
from .mappings import CE_DATA_CONTENT_TYPE, CE_SPEC_VERSION
from .utils import optional_str, require_mapping, require_str


@dataclass(frozen=True)
class Resource:
    """The resource a legacy event refers to."""

    name: str
    service: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_value(cls, value):
        """Parse the legacy ``resource`` field.

        Most payloads carry an object with ``service``, ``type`` and ``name``;
        the oldest Firebase payloads carry the resource name as a bare string.
        """
        if isinstance(value, str) and value:
            return cls(name=value)
        if value is None:
            raise MalformedContextError("Missing required field: resource.name", "resource.name")
        resource = require_mapping(value, "resource")
        return cls(
            name=require_str(resource, "name", "resource.name"),
            service=optional_str(resource, "service", "resource.service"),
            type=optional_str(resource, "type", "resource.type"),
        )


@dataclass(frozen=True)
class Context:
    """Envelope of a legacy background event."""

    event_id: str
    event_type: str
    resource: Resource
    timestamp: Optional[str] = None
    domain: Optional[str] = None

    @classmethod
    def from_dict(cls, obj):
        """Build a Context from a legacy context object.

        Args:
            obj (dict): The ``context`` object, or the whole payload for the
                oldest shape where context fields sit at the top level.

        Raises:
            MalformedContextError: If eventId, eventType or resource.name is missing.
        """
        obj = require_mapping(obj, "context")
        return cls(
            event_id=require_str(obj, "eventId"),
            event_type=require_str(obj, "eventType"),
            resource=Resource.from_value(obj.get("resource")),
            # Passed through to the CloudEvent without validation
            timestamp=obj.get("timestamp"),
            domain=optional_str(obj, "domain"),
        )

    @property
    def service(self):
        return self.resource.service

    @property
    def resource_name(self):
        return self.resource.name


@dataclass(frozen=True)
class CloudEvent:
    """A CloudEvents v1.0 envelope produced from a legacy event."""

    id: str
    source: str
    type: str
    subject: Optional[str] = None
    time: Optional[str] = None
    data: Any = None
    specversion: str = CE_SPEC_VERSION
    datacontenttype: str = CE_DATA_CONTENT_TYPE
    dataschema: Optional[str] = None

    def to_dict(self):
        """Return the event attributes and data keyed by their CloudEvents names."""
        return {
            "id": self.id,
            "source": self.source,
            "specversion": self.specversion,
            "type": self.type,
            "datacontenttype": self.datacontenttype,
            "dataschema": self.dataschema,
            "subject": self.subject,
            "time": self.time,
            "data": self.data,
        }
