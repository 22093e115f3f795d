"""Image identifier derivation"""


def derive_identifier(file_name: str) -> tuple[str, str]:
    """Split a stored file name into identifier and file type

    Only the last dot separates the extension. A name without a dot has
    no file type, which is not an error.

    Args:
        file_name: Stored file name, e.g. "66f2cbaf9c143.png"

    Returns:
        (identifier, file_type), e.g. ("66f2cbaf9c143", "png")

    Example:
        >>> derive_identifier("archive.tar.gz")
        ('archive.tar', 'gz')
        >>> derive_identifier("README")
        ('README', '')
    """
    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        return file_name, ""
    return stem, extension
