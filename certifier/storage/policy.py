MIB = 1024 * 1024
MAX_UPLOAD_BYTES = 50 * MIB


def upload_timeout_seconds(
    size_bytes: int,
    *,
    base_seconds: float,
    per_mib_seconds: float,
) -> float:
    """Wall-clock allowance for an upload: a base plus time proportional to size."""
    return base_seconds + per_mib_seconds * (size_bytes / MIB)
