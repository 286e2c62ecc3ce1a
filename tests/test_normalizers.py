import copy
import unittest

from src.functions.event_mapping.models import Context, Resource
from src.functions.event_mapping.normalizers.firebase_auth import (
    normalize_firebase_auth_data,
    rename_metadata_fields,
)
from src.functions.event_mapping.normalizers.pubsub import normalize_pubsub_data

PUBSUB_CONTEXT = Context(
    event_id="123",
    event_type="google.pubsub.topic.publish",
    resource=Resource(name="projects/p1/topics/t1", service="pubsub.googleapis.com"),
    timestamp="2021-01-01T00:00:00.000Z",
)


class TestPubsubNormalizer(unittest.TestCase):

    def test_object_data_gets_message_fields(self):
        data = {"@type": "type.googleapis.com/google.pubsub.v1.PubsubMessage", "data": "eHl6", "attributes": {"a": "b"}}
        original = copy.deepcopy(data)

        result = normalize_pubsub_data(PUBSUB_CONTEXT, data)

        self.assertEqual(result, {
            "message": {
                "@type": "type.googleapis.com/google.pubsub.v1.PubsubMessage",
                "data": "eHl6",
                "attributes": {"a": "b"},
                "messageId": "123",
                "publishTime": "2021-01-01T00:00:00.000Z",
            }
        })
        self.assertEqual(data, original)

    def test_scalar_data_is_wrapped(self):
        result = normalize_pubsub_data(PUBSUB_CONTEXT, "aGVsbG8=")
        self.assertEqual(result, {
            "message": {
                "data": "aGVsbG8=",
                "messageId": "123",
                "publishTime": "2021-01-01T00:00:00.000Z",
            }
        })

    def test_missing_data_is_wrapped_as_null(self):
        result = normalize_pubsub_data(PUBSUB_CONTEXT, None)
        self.assertIsNone(result["message"]["data"])
        self.assertEqual(result["message"]["messageId"], "123")


class TestFirebaseAuthNormalizer(unittest.TestCase):

    def test_metadata_fields_are_renamed(self):
        data = {
            "metadata": {"createdAt": "2020-05-26T10:42:27Z", "lastSignedInAt": "2020-10-24T11:00:00Z"},
            "uid": "UUpby3s4spZre6kHsgVSPetzQ8l2",
            "email": "test@nowhere.com",
        }
        original = copy.deepcopy(data)

        result, subject = normalize_firebase_auth_data(data, None)

        self.assertEqual(result["metadata"], {
            "createTime": "2020-05-26T10:42:27Z",
            "lastSignInTime": "2020-10-24T11:00:00Z",
        })
        self.assertEqual(result["email"], "test@nowhere.com")
        self.assertEqual(subject, "users/UUpby3s4spZre6kHsgVSPetzQ8l2")
        self.assertEqual(data, original)

    def test_only_present_fields_are_renamed(self):
        renamed = rename_metadata_fields({"createdAt": "t1", "other": 1})
        self.assertEqual(renamed, {"createTime": "t1", "other": 1})
        self.assertNotIn("lastSignInTime", renamed)

    def test_uid_overrides_subject(self):
        _, subject = normalize_firebase_auth_data({"uid": "u1"}, "events/something")
        self.assertEqual(subject, "users/u1")

    def test_null_uid_gives_empty_user_segment(self):
        _, subject = normalize_firebase_auth_data({"uid": None}, "kept")
        self.assertEqual(subject, "users/")

    def test_subject_kept_without_uid(self):
        data = {"metadata": {"createdAt": "t1"}}
        result, subject = normalize_firebase_auth_data(data, "kept")
        self.assertEqual(subject, "kept")
        self.assertEqual(result, {"metadata": {"createTime": "t1"}})

    def test_non_object_data_passes_through(self):
        self.assertEqual(normalize_firebase_auth_data(None, None), (None, None))
        self.assertEqual(normalize_firebase_auth_data("x", "s"), ("x", "s"))


if __name__ == '__main__':
    unittest.main()
