"""Text filters for building post excerpts.

These mirror the Liquid filters of the same names so excerpts generated here
match what the site templates would produce.
"""

import re

SCRIPT_PATTERN = re.compile(r"<script.*?</script>", re.DOTALL)
COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
STYLE_PATTERN = re.compile(r"<style.*?</style>", re.DOTALL)
TAG_PATTERN = re.compile(r"<.*?>", re.DOTALL)

EXCERPT_STRATEGIES = ("chars", "words")


def strip_html(text: str | None) -> str:
    """Remove scripts, comments, styles, then every remaining tag.

    The patterns run over the whole input, so tags spanning lines are removed.

    Args:
        text: HTML text, or None

    Returns:
        Text with markup removed ("" for None)

    Examples:
        >>> strip_html("<p>Hi <b>there</b></p>")
        'Hi there'
    """
    if text is None:
        return ""
    text = str(text)
    text = SCRIPT_PATTERN.sub("", text)
    text = COMMENT_PATTERN.sub("", text)
    text = STYLE_PATTERN.sub("", text)
    return TAG_PATTERN.sub("", text)


def truncatewords(text: str | None, words: int = 15, suffix: str = "...") -> str | None:
    """Truncate text to a number of words.

    Text that is not truncated is returned untouched, whitespace included.
    A limit below one still keeps the first word.

    Examples:
        >>> truncatewords("one two three four", 2)
        'one two...'
    """
    if text is None:
        return None
    wordlist = str(text).split()
    last = max(int(words) - 1, 0)
    if len(wordlist) > last:
        return " ".join(wordlist[: last + 1]) + suffix
    return text


def truncatechars(text: str | None, limit: int = 300, suffix: str = "...") -> str | None:
    """Truncate text to a number of characters without splitting words.

    Args:
        text: Plain text, or None
        limit: Maximum characters before the suffix
        suffix: Appended when the text was truncated

    Returns:
        The text unchanged when it fits, otherwise the leading whole words
        that stay under the limit followed by the suffix

    Examples:
        >>> truncatechars("alpha beta gamma", 12)
        'alpha beta...'
    """
    if text is None:
        return None
    if len(text) <= limit:
        return text

    count = 0
    kept: list[str] = []
    for word in text.split():
        if count + len(word) >= limit:
            return " ".join(kept) + suffix
        count += len(word) + 1
        kept.append(word)

    # Only reachable when runs of whitespace pushed the raw length over the limit.
    return " ".join(kept)


def make_excerpt(html: str | None, strategy: str = "chars", length: int = 240) -> str:
    """Build a plain-text excerpt from an HTML body.

    Args:
        html: HTML body
        strategy: "chars" for character truncation, "words" for word truncation
        length: Character or word limit

    Returns:
        The sanitized, truncated excerpt
    """
    text = strip_html(html)
    if strategy == "chars":
        return truncatechars(text, length) or ""
    if strategy == "words":
        return truncatewords(text, length) or ""
    raise ValueError(f"Unknown excerpt strategy: {strategy!r}")

