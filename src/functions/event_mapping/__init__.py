"""
Legacy event mapping for Cloud Functions.

This module converts legacy background event payloads (Pub/Sub, Cloud Storage,
Firestore and Firebase) and raw Pub/Sub push requests into CloudEvents.
"""
