from pathlib import Path


def file_exists(file: str | Path) -> bool:
    """
    Checks whether a file exists (and it is a file)
    Args:
        file: File path to check

    Returns: true if conditions are met

    """
    if isinstance(file, str):
        file = Path(file)

    return file.exists() and file.is_file()


def unreadable_file_reason(file: str | Path) -> str | None:
    """
    Finds out why a profile file cannot be used as a document source
    Args:
        file: File path to check

    Returns: a short reason if the file is missing, not a regular file or empty. None otherwise

    """
    if isinstance(file, str):
        file = Path(file)

    if not file.exists():
        return 'file does not exist'
    if not file_exists(file):
        return 'path is not a file'
    if file.stat().st_size == 0:
        return 'file is empty'
    return None
