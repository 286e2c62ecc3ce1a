# Static lookup tables for converting legacy background events to CloudEvents.
# For the upstream mapping rules see
# https://github.com/GoogleCloudPlatform/functions-framework-conformance/blob/main/docs/mapping.md
import re
from types import MappingProxyType

# --- Legacy Pub/Sub push constants ---
PUBSUB_LEGACY_EVENT_TYPE = "google.pubsub.topic.publish"
PUBSUB_MESSAGE_TYPE = "type.googleapis.com/google.pubsub.v1.PubsubMessage"
UNKNOWN_PUBSUB_TOPIC = "UNKNOWN_PUBSUB_TOPIC"
PUBSUB_TOPIC_PATH_PATTERN = re.compile(r"projects/[^/?]+/topics/[^/?]+")

# --- CloudEvent service names ---
FIREBASE_AUTH_CE_SERVICE = "firebaseauth.googleapis.com"
FIREBASE_CE_SERVICE = "firebase.googleapis.com"
FIREBASE_DB_CE_SERVICE = "firebasedatabase.googleapis.com"
FIRESTORE_CE_SERVICE = "firestore.googleapis.com"
PUBSUB_CE_SERVICE = "pubsub.googleapis.com"
STORAGE_CE_SERVICE = "storage.googleapis.com"

# --- Firebase Realtime Database locations ---
DEFAULT_FIREBASE_DB_DOMAIN = "firebaseio.com"
DEFAULT_FIREBASE_DB_LOCATION = "us-central1"
FIREBASE_DB_LOCATION_PATTERN = re.compile(r"^([\w-]+)\.")

# --- CloudEvent envelope constants ---
CE_SPEC_VERSION = "1.0"
CE_DATA_CONTENT_TYPE = "application/json"

# Legacy event type -> CloudEvent type (exact match)
EVENT_TYPE_MAP = MappingProxyType({
    "google.pubsub.topic.publish": "google.cloud.pubsub.topic.v1.messagePublished",
    "providers/cloud.pubsub/eventTypes/topic.publish": "google.cloud.pubsub.topic.v1.messagePublished",
    "google.storage.object.finalize": "google.cloud.storage.object.v1.finalized",
    "google.storage.object.delete": "google.cloud.storage.object.v1.deleted",
    "google.storage.object.archive": "google.cloud.storage.object.v1.archived",
    "google.storage.object.metadataUpdate": "google.cloud.storage.object.v1.metadataUpdated",
    "providers/cloud.firestore/eventTypes/document.write": "google.cloud.firestore.document.v1.written",
    "providers/cloud.firestore/eventTypes/document.create": "google.cloud.firestore.document.v1.created",
    "providers/cloud.firestore/eventTypes/document.update": "google.cloud.firestore.document.v1.updated",
    "providers/cloud.firestore/eventTypes/document.delete": "google.cloud.firestore.document.v1.deleted",
    "providers/firebase.auth/eventTypes/user.create": "google.firebase.auth.user.v1.created",
    "providers/firebase.auth/eventTypes/user.delete": "google.firebase.auth.user.v1.deleted",
    "providers/google.firebase.analytics/eventTypes/event.log": "google.firebase.analytics.log.v1.written",
    "providers/google.firebase.database/eventTypes/ref.create": "google.firebase.database.ref.v1.created",
    "providers/google.firebase.database/eventTypes/ref.write": "google.firebase.database.ref.v1.written",
    "providers/google.firebase.database/eventTypes/ref.update": "google.firebase.database.ref.v1.updated",
    "providers/google.firebase.database/eventTypes/ref.delete": "google.firebase.database.ref.v1.deleted",
    "providers/cloud.storage/eventTypes/object.change": "google.cloud.storage.object.v1.finalized",
})

# Legacy event type prefix -> CloudEvent service. Order matters: first match wins.
SERVICE_MAP = MappingProxyType({
    "providers/cloud.firestore/": FIRESTORE_CE_SERVICE,
    "providers/google.firebase.analytics/": FIREBASE_CE_SERVICE,
    "providers/firebase.auth/": FIREBASE_AUTH_CE_SERVICE,
    "providers/google.firebase.database/": FIREBASE_DB_CE_SERVICE,
    "providers/cloud.pubsub/": PUBSUB_CE_SERVICE,
    "providers/cloud.storage/": STORAGE_CE_SERVICE,
})

# CloudEvent service -> pattern splitting a legacy resource string.
# Each pattern has exactly two groups: (resource, subject).
RESOURCE_REGEX_MAP = MappingProxyType({
    FIREBASE_CE_SERVICE: re.compile(r"^(projects/[^/]+)/(events/[^/]+)$"),
    FIREBASE_DB_CE_SERVICE: re.compile(r"^projects/_/(instances/[^/]+)/(refs/.+)$"),
    FIRESTORE_CE_SERVICE: re.compile(r"^(projects/[^/]+/databases/\(default\))/(documents/.+)$"),
    STORAGE_CE_SERVICE: re.compile(r"^(projects/_/buckets/[^/]+)/(objects/.+)$"),
})

# Firebase Auth metadata field -> CloudEvent field
FIREBASE_AUTH_METADATA_FIELD_MAP = MappingProxyType({
    "createdAt": "createTime",
    "lastSignedInAt": "lastSignInTime",
})
