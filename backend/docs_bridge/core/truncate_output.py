"""Output Truncation — final post-processing step on a fully rendered string.

Invariants:
    - max_length None or >= len(text) → text returned unchanged
    - Otherwise: text[:max_length] + marker reporting elided and total characters
    - Never applied mid-render
"""


def truncate_output(text: str, max_length: int | None) -> str:
    """Cut text at max_length characters and append an elision marker."""
    if max_length is None or len(text) <= max_length:
        return text
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")
    total = len(text)
    elided = total - max_length
    return (
        f"{text[:max_length]}\n\n"
        f"... [truncated {elided} of {total} characters]"
    )
