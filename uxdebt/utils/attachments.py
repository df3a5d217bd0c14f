"""
attachments.py - Screenshot attachment utility
UX Debt Tracker v1.0
"""
import asyncio
import base64
import mimetypes
import os

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}
MAX_SCREENSHOT_BYTES = 5 * 1024 * 1024


def read_as_data_uri(src_path: str) -> str:
    """
    Read an image file and return it as a ``data:`` URI.

    The value is stored on the debt item as-is and never interpreted.

    Raises:
        ValueError: unsupported extension or file larger than MAX_SCREENSHOT_BYTES
        OSError: file could not be read
    """
    ext = os.path.splitext(src_path)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ValueError(f"Unsupported image type: {ext or '(none)'}")
    if os.path.getsize(src_path) > MAX_SCREENSHOT_BYTES:
        raise ValueError("Screenshot is larger than 5 MB")

    mime = mimetypes.guess_type(src_path)[0] or "image/png"
    with open(src_path, "rb") as f:
        encoded = base64.b64encode(f.read()).decode("ascii")
    return f"data:{mime};base64,{encoded}"


async def load_screenshot(src_path: str, on_loaded) -> None:
    """Read off the event loop, then hand the data URI to ``on_loaded``."""
    data_uri = await asyncio.to_thread(read_as_data_uri, src_path)
    on_loaded(data_uri)
