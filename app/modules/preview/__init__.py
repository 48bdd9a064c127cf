"""Previewing and verifying a built site."""

from modules.preview.server import create_preview_app, resolve_site_file
from modules.preview.verify import VerificationReport, verify_site

__all__ = [
    "create_preview_app",
    "resolve_site_file",
    "VerificationReport",
    "verify_site",
]
