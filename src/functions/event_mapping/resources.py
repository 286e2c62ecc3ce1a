# Resolution of CloudEvent type, service, resource and subject
import re

from .errors import ResourcePatternExecutionError, ResourcePatternMismatchError
from .mappings import (
    DEFAULT_FIREBASE_DB_DOMAIN,
    DEFAULT_FIREBASE_DB_LOCATION,
    EVENT_TYPE_MAP,
    FIREBASE_DB_CE_SERVICE,
    FIREBASE_DB_LOCATION_PATTERN,
    RESOURCE_REGEX_MAP,
    SERVICE_MAP,
)


def resolve_type(event_type):
    """Map a legacy event type to its CloudEvent type, defaulting to the legacy type."""
    return EVENT_TYPE_MAP.get(event_type, event_type)


def resolve_service(event_type):
    """Map a legacy event type to its CloudEvent service by prefix.

    Defaults to the legacy event type when no prefix matches, so the result is
    not guaranteed to be a hostname.
    """
    for prefix, service in SERVICE_MAP.items():
        if event_type.startswith(prefix):
            return service
    return event_type


def firebase_db_location(domain):
    """Infer the Realtime Database location from the legacy domain, or None."""
    if domain == DEFAULT_FIREBASE_DB_DOMAIN:
        return DEFAULT_FIREBASE_DB_LOCATION
    match = FIREBASE_DB_LOCATION_PATTERN.match(domain)
    if not match:
        return None
    return match.group(1)


def split_resource_subject(service, resource_name, domain=None):
    """Split a legacy resource string into CloudEvent resource and subject.

    Args:
        service (str): CloudEvent service name.
        resource_name (str): Legacy resource name.
        domain (str): Legacy domain, only used for Firebase Realtime Database.

    Returns:
        tuple: (resource, subject). Services without a known pattern return
        (resource_name, None); Firebase Database events without a usable
        domain return (None, None).

    Raises:
        ResourcePatternMismatchError: If the resource does not match the service's pattern.
        ResourcePatternExecutionError: If matching itself fails.
    """
    pattern = RESOURCE_REGEX_MAP.get(service)
    if pattern is None:
        return resource_name, None

    try:
        match = pattern.match(resource_name)
    except (re.error, TypeError, RecursionError) as e:
        raise ResourcePatternExecutionError(service, resource_name) from e
    if not match:
        raise ResourcePatternMismatchError(service, resource_name)

    if service == FIREBASE_DB_CE_SERVICE:
        if domain is None:
            return None, None
        location = firebase_db_location(domain)
        if location is None:
            return None, None
        return f"projects/_/locations/{location}/{match.group(1)}", match.group(2)

    return match.group(1), match.group(2)
