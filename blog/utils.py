DEFAULT_WORDS_PER_MINUTE = 200


def calculate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> float:
    """Estimated minutes to read ``text`` at a fixed reading speed."""
    words = (text or "").split()
    return len(words) / words_per_minute


def format_reading_time(minutes: float) -> str:
    rounded = round(minutes)
    if minutes > 0:
        rounded = max(rounded, 1)
    return f"{rounded} min(s) read"
