# Normalization of Firebase Auth event data and subject
from ..mappings import FIREBASE_AUTH_METADATA_FIELD_MAP


def rename_metadata_fields(metadata):
    """Return a copy of metadata with legacy field names replaced by CloudEvent names.

    Only fields that are present are renamed.
    """
    renamed = dict(metadata)
    for old_name, new_name in FIREBASE_AUTH_METADATA_FIELD_MAP.items():
        if old_name in renamed:
            renamed[new_name] = renamed.pop(old_name)
    return renamed


def normalize_firebase_auth_data(data, subject):
    """Rename Firebase Auth metadata fields and derive the subject from the user id.

    Args:
        data: Legacy event data, normally a user record.
        subject (str): Subject from the generic resource split.

    Returns:
        tuple: (data, subject). When data has a uid the subject is users/<uid>.
    """
    if not isinstance(data, dict):
        return data, subject

    if isinstance(data.get("metadata"), dict):
        data = dict(data)
        data["metadata"] = rename_metadata_fields(data["metadata"])

    if "uid" in data:
        uid = data["uid"]
        subject = f"users/{uid if uid is not None else ''}"

    return data, subject
