"""
Image storage for product and profile pictures.
Files live flat under Config.UPLOAD_DIR and are referenced as
"<UPLOAD_URL_PREFIX>/<filename>".
"""
import logging
import os
from uuid import uuid4

from fastapi import UploadFile

from app.config import Config
from app.errors import ErrorType
from app.exceptions import AppException

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGES = {Config.DEFAULT_PRODUCT_IMAGE, Config.DEFAULT_USER_IMAGE}


def allowed_image_extension(filename: str) -> bool:
    extension = os.path.splitext(filename)[1].lower().lstrip(".")
    if not extension:
        return False
    return extension in Config.ALLOWED_IMAGE_EXTENSIONS


def is_placeholder(image_path: str | None) -> bool:
    if not image_path:
        return True
    return os.path.basename(image_path) in PLACEHOLDER_IMAGES


async def save_image(upload: UploadFile) -> str:
    """Validate and store an uploaded image.

    Returns:
        Public path of the stored file, e.g. "/uploads/<hex>.png"

    Raises:
        AppException: VALIDATION when the file is missing, not an image or too large
    """
    if not upload or not upload.filename:
        raise AppException(ErrorType.VALIDATION, "No file uploaded")

    if not allowed_image_extension(upload.filename):
        raise AppException(
            ErrorType.VALIDATION,
            "Only image files are allowed (jpg, jpeg, png, gif, webp)"
        )
    if not (upload.content_type or "").startswith("image/"):
        raise AppException(ErrorType.VALIDATION, "Only image files are allowed")

    # Read one byte past the limit to detect oversize files
    content = await upload.read(Config.MAX_UPLOAD_SIZE + 1)
    if len(content) > Config.MAX_UPLOAD_SIZE:
        limit_mb = Config.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise AppException(ErrorType.VALIDATION, f"Image exceeds the {limit_mb}MB limit")

    extension = os.path.splitext(upload.filename)[1].lower()
    filename = f"{uuid4().hex}{extension}"

    os.makedirs(Config.UPLOAD_DIR, exist_ok=True)
    with open(os.path.join(Config.UPLOAD_DIR, filename), "wb") as fh:
        fh.write(content)

    logger.info(f"Stored upload {upload.filename!r} as {filename}")
    return f"{Config.UPLOAD_URL_PREFIX}/{filename}"


def remove_image(image_path: str | None) -> bool:
    """Delete a stored image unless it is a placeholder or an external URL.

    Returns True when a file was removed.
    """
    if is_placeholder(image_path) or "://" in image_path:
        return False

    target = os.path.join(Config.UPLOAD_DIR, os.path.basename(image_path))
    try:
        os.remove(target)
    except FileNotFoundError:
        logger.warning(f"Image already missing: {target}")
        return False

    logger.info(f"Removed image {target}")
    return True
