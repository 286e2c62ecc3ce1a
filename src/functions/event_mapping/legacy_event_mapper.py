"""Conversion of legacy background events into CloudEvents.

Cloud Functions used to receive "background events": a JSON body with an event
``context`` and ``data``. This module turns those payloads, as well as raw
Pub/Sub push requests, into CloudEvents v1.0 envelopes.
"""
from .mappings import (
    CE_DATA_CONTENT_TYPE,
    CE_SPEC_VERSION,
    FIREBASE_AUTH_CE_SERVICE,
    PUBSUB_CE_SERVICE,
)
from .models import CloudEvent
from .normalizers import firebase_auth, pubsub
from .payload import extract_context_and_data
from .resources import resolve_service, resolve_type, split_resource_subject


def rewrite_for_service(service, context, data, subject):
    """Apply service specific rewrites to the event data and subject."""
    if service == PUBSUB_CE_SERVICE:
        return pubsub.normalize_pubsub_data(context, data), subject
    elif service == FIREBASE_AUTH_CE_SERVICE:
        return firebase_auth.normalize_firebase_auth_data(data, subject)
    return data, subject


def assemble_cloud_event(ce_id, ce_service, ce_resource, ce_type, ce_subject, ce_time, data):
    """Build the CloudEvent envelope from already resolved fields."""
    # A missing resource renders as an empty trailing segment
    resource = "" if ce_resource is None else ce_resource
    return CloudEvent(
        id=ce_id,
        source=f"//{ce_service}/{resource}",
        specversion=CE_SPEC_VERSION,
        type=ce_type,
        datacontenttype=CE_DATA_CONTENT_TYPE,
        dataschema=None,
        subject=ce_subject,
        time=ce_time,
        data=data,
    )


def from_json_data(json_data, request_path):
    """Convert a legacy event payload into a CloudEvent.

    Args:
        json_data (dict): The parsed request body.
        request_path (str): The request URI path.

    Returns:
        CloudEvent: The equivalent CloudEvent.

    Raises:
        MalformedContextError: If the legacy context is missing mandatory fields.
        ResourcePatternError: If the resource does not have the shape its service requires.
    """
    context, data = extract_context_and_data(json_data, request_path)

    ce_type = resolve_type(context.event_type)
    # Explicit resource service wins over the one derived from the event type
    ce_service = context.service or resolve_service(context.event_type)

    ce_resource, ce_subject = split_resource_subject(
        ce_service, context.resource_name, context.domain
    )
    data, ce_subject = rewrite_for_service(ce_service, context, data, ce_subject)

    return assemble_cloud_event(
        ce_id=context.event_id,
        ce_service=ce_service,
        ce_resource=ce_resource,
        ce_type=ce_type,
        ce_subject=ce_subject,
        ce_time=context.timestamp,
        data=data,
    )


class LegacyEventMapper:
    """Stateless wrapper around from_json_data for callers that want an object."""

    def from_json_data(self, json_data, request_path):
        return from_json_data(json_data, request_path)
