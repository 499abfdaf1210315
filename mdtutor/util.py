"""Small text helpers."""


def sample_string(text: str, max_len: int) -> str:
    """Return at most ``max_len`` leading characters of ``text`` on one line.

    Newlines and carriage returns become spaces so the sample never
    breaks a line of the debug dump.
    """
    if max_len <= 0:
        return ""
    sample = text[:max_len]
    return sample.replace("\r", " ").replace("\n", " ")
