"""Beer photo upload to Supabase Storage."""

import logging
import secrets
import string
import time
from typing import Optional

from django.conf import settings
from supabase import StorageException

from apps.core.backend import get_service_client, upstream_message
from .exceptions import InvalidPhotoError, PhotoUploadError

logger = logging.getLogger(__name__)

SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 6


def generate_photo_filename(original_name: str, *, timestamp_ms: Optional[int] = None) -> str:
    """
    Build a collision-resistant object name.

    The name is ``<unix millis>-<6 random chars>.<extension>``, where the
    extension is whatever follows the last dot of ``original_name``.

    Example:
        >>> generate_photo_filename('IMG_0042.JPG', timestamp_ms=1700000000000)
        '1700000000000-k3x9q2.jpg'
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    suffix = ''.join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    extension = (original_name or '').rsplit('.', 1)[-1].lower()
    if not extension:
        return f'{timestamp_ms}-{suffix}'
    return f'{timestamp_ms}-{suffix}.{extension}'


def upload_photo(*, file) -> str:
    """
    Store an uploaded photo and return its public URL.

    Args:
        file: Django ``UploadedFile`` from a multipart request

    Returns:
        Public URL of the stored object

    Raises:
        InvalidPhotoError: If the file is not an image or too large
        PhotoUploadError: If storage rejects the upload
    """
    content_type = getattr(file, 'content_type', None) or 'application/octet-stream'
    if not content_type.startswith('image/'):
        raise InvalidPhotoError(f"Unsupported content type: {content_type}")

    if file.size > settings.PHOTO_MAX_UPLOAD_BYTES:
        raise InvalidPhotoError(
            f"File too large: {file.size} bytes (limit {settings.PHOTO_MAX_UPLOAD_BYTES})"
        )

    bucket = get_service_client().storage.from_(settings.SUPABASE_PHOTO_BUCKET)
    filename = generate_photo_filename(file.name)

    try:
        bucket.upload(
            path=filename,
            file=file.read(),
            file_options={'content-type': content_type, 'upsert': 'false'},
        )
    except StorageException as e:
        logger.warning("Photo upload %s failed: %s", filename, upstream_message(e))
        raise PhotoUploadError(upstream_message(e))

    logger.info("Uploaded photo %s (%d bytes)", filename, file.size)
    return bucket.get_public_url(filename)
