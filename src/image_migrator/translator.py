"""Legacy record to destination record translation"""
from .model import Image, LegacyImage


def to_destination_record(
    legacy: LegacyImage,
    identifier: str,
    file_type: str,
    payload: bytes,
) -> Image:
    """Build the destination record for one downloaded image

    Timestamps are copied from the legacy record unchanged.

    Args:
        legacy: Source record
        identifier: Identifier derived from ``legacy.name``
        file_type: File type derived from ``legacy.name``
        payload: Downloaded image bytes

    Returns:
        Unsaved Image instance
    """
    return Image(
        created_at=legacy.created_at,
        updated_at=legacy.updated_at,
        image_identifier=identifier,
        original_file_name=legacy.origin_name,
        image_type=file_type,
        image_file_data=payload,
    )
