"""
Service Normalizers Module.

This module contains the service specific rewrites applied to event data
and subject after the generic resource split.
"""
