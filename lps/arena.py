def partition(candidates: list[str], dop: int) -> list[list[str]]:
    """Split `candidates` into min(dop, len(candidates)) contiguous, non-empty chunks.

    Chunk sizes differ by at most one; the first chunks take the remainder.
    """
    if dop < 1:
        raise ValueError(f"degree of parallelism must be at least 1, got {dop}")
    count = min(dop, len(candidates))
    if count == 0:
        return []

    size, extra = divmod(len(candidates), count)
    chunks: list[list[str]] = []
    start = 0
    for i in range(count):
        end = start + size + (1 if i < extra else 0)
        chunks.append(candidates[start:end])
        start = end
    return chunks
