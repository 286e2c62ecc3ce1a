# Payload shape detection and extraction of the legacy context and data
import datetime

from .mappings import (
    PUBSUB_CE_SERVICE,
    PUBSUB_LEGACY_EVENT_TYPE,
    PUBSUB_MESSAGE_TYPE,
    PUBSUB_TOPIC_PATH_PATTERN,
    UNKNOWN_PUBSUB_TOPIC,
)
from .models import Context
from .utils import get_structured_logger, require_mapping

logger = get_structured_logger(__name__)


def is_raw_pubsub_payload(payload):
    """Check whether payload is a raw Pub/Sub push request rather than a background event."""
    if "context" in payload:
        return False
    if "subscription" not in payload or "message" not in payload:
        return False
    message = payload["message"]
    return isinstance(message, dict) and "data" in message and "messageId" in message


def extract_topic(request_path):
    """Extract the Pub/Sub topic name from the push endpoint path.

    Returns the UNKNOWN_PUBSUB_TOPIC placeholder, after logging two warnings,
    when the path does not name a topic.
    """
    match = PUBSUB_TOPIC_PATH_PATTERN.search(request_path or "")
    if match:
        return match.group(0)

    logger.warning("Failed to extract the topic name from the URL path.")
    logger.warning(
        "Configure your subscription's push endpoint to use the following path: "
        "projects/PROJECT_NAME/topics/TOPIC_NAME"
    )
    return UNKNOWN_PUBSUB_TOPIC


def current_timestamp():
    """Current UTC time in RFC 3339 format with microsecond precision."""
    return datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def convert_raw_pubsub_payload(payload, request_path):
    """Wrap a raw Pub/Sub push request in a legacy {context, data} envelope."""
    message = payload["message"]
    topic = extract_topic(request_path)

    # An explicit null publishTime is passed through
    if "publishTime" in message:
        timestamp = message["publishTime"]
    else:
        timestamp = current_timestamp()

    return {
        "context": {
            "eventId": message["messageId"],
            "timestamp": timestamp,
            "eventType": PUBSUB_LEGACY_EVENT_TYPE,
            "resource": {
                "service": PUBSUB_CE_SERVICE,
                "type": PUBSUB_MESSAGE_TYPE,
                "name": topic,
            },
        },
        "data": {
            "@type": PUBSUB_MESSAGE_TYPE,
            "data": message["data"],
            "attributes": message.get("attributes"),
        },
    }


def normalize_payload(payload, request_path):
    """Return payload in the legacy {context, data} shape.

    Raw Pub/Sub push requests are converted; anything else is returned unchanged.
    """
    if is_raw_pubsub_payload(payload):
        return convert_raw_pubsub_payload(payload, request_path)
    return payload


def extract_context_and_data(json_data, request_path):
    """Split a legacy event payload into its Context and data.

    Args:
        json_data (dict): The parsed request body.
        request_path (str): The request URI path, used to recover Pub/Sub topics.

    Returns:
        tuple: (Context, data) where data is None when the payload has none.

    Raises:
        MalformedContextError: If the context cannot be parsed.
    """
    payload = normalize_payload(require_mapping(json_data, "payload"), request_path)
    data = payload.get("data")

    if "context" in payload:
        context = Context.from_dict(payload["context"])
    else:
        # Oldest shape: context fields live at the top level next to data
        context = Context.from_dict({k: v for k, v in payload.items() if k != "data"})

    return context, data
