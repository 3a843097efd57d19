"""Utility package for the QR code generator.

This package exposes the payload rules, rendering, export and dispatch
helpers used by the application.
"""

from .dispatch import send_email, send_sms
from .errors import DispatchFailed, MissingField, PermissionDenied, QRAppError, WriteFailed
from .export import DocumentStore, ExportPipeline, ExportState, StoragePermission, export_image
from .form_state import FormState, QRSession
from .payloads import Category, build_payload, form_fields
from .qr_generator import qr_data_url, qr_png_bytes, render_qr

__all__ = [
    "Category",
    "DispatchFailed",
    "DocumentStore",
    "ExportPipeline",
    "ExportState",
    "FormState",
    "MissingField",
    "PermissionDenied",
    "QRAppError",
    "QRSession",
    "StoragePermission",
    "WriteFailed",
    "build_payload",
    "export_image",
    "form_fields",
    "qr_data_url",
    "qr_png_bytes",
    "render_qr",
    "send_email",
    "send_sms",
]
