# main.py - Cloud Functions entry point for legacy event conversion
import json
import logging

import functions_framework
from cloudevents.conversion import to_structured
from cloudevents.http import CloudEvent as StructuredCloudEvent

from src.functions.event_mapping import config
from src.functions.event_mapping.errors import LegacyEventError
from src.functions.event_mapping.legacy_event_mapper import from_json_data

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}


def to_structured_cloud_event(event):
    """Convert a mapped CloudEvent into the CloudEvents SDK representation.

    Attributes without a value are left out rather than sent as null.
    """
    attributes = {
        name: value
        for name, value in event.to_dict().items()
        if name != 'data' and value is not None
    }
    structured_event = StructuredCloudEvent(attributes, event.data)
    # The SDK fills in the current time when none is given; the legacy event had none
    if event.time is None and 'time' in structured_event:
        del structured_event['time']
    return structured_event


@functions_framework.http
def convert_legacy_event(request):
    """
    Cloud Function entry point converting a legacy background event to a CloudEvent.

    Args:
        request (flask.Request): HTTP request carrying the legacy event as JSON.

    Returns:
        The CloudEvent in structured JSON mode, or a JSON error with status 400.
    """
    request_json = request.get_json(silent=True)
    if not isinstance(request_json, dict):
        return (json.dumps({"error": "Request body is empty or not a JSON object"}), 400, JSON_HEADERS)

    try:
        event = from_json_data(request_json, request.path)
    except LegacyEventError as e:
        logger.error(f"Failed to convert legacy event: {e}")
        return (json.dumps({"error": str(e)}), 400, JSON_HEADERS)

    logger.info(f"Converted legacy event {event.id} to CloudEvent type {event.type}")
    headers, body = to_structured(to_structured_cloud_event(event))
    return (body, 200, headers)
