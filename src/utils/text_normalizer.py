"""Title normalization for feedback submissions.

A feedback title is used directly as a filename stem in two directories,
so normalization has two jobs:

1. **Identity** -- titles are lowercased, so ``"Foo"`` and ``"FOO"`` name the
   same artifact and the second submission collides with the first.

2. **Filename safety** -- anything that could escape the storage directory
   (path separators, ``..``, NUL) or produce a hidden/unwritable name is
   rejected with :class:`InvalidTitleError` before any filesystem call.

No other rewriting happens: whitespace and punctuation are kept as typed.
Length is measured in UTF-8 bytes of the lowercased title, since that is
what the filesystem limits.
"""

from src.utils.errors import InvalidTitleError

# Filesystems cap a name at 255 bytes; leave room for the ".txt" suffix
# and count the lowercased form, which can be longer than the input.
MAX_TITLE_BYTES = 200

_FORBIDDEN_CHARS = frozenset({"/", "\\", "\x00"})


def normalize_title(title: str) -> str:
    """Lowercase *title* and verify it is safe to use as a filename stem.

    Args:
        title: Raw title as submitted in the form.

    Returns:
        The lowercased title.  ``normalize_title(normalize_title(t))``
        equals ``normalize_title(t)``.

    Raises:
        InvalidTitleError: The title is blank, too long once encoded as
            UTF-8, or could address a path outside the storage directory.
    """
    if not title or not title.strip():
        raise InvalidTitleError("Title must not be empty")

    if any(char in _FORBIDDEN_CHARS for char in title):
        raise InvalidTitleError("Title must not contain path separators")

    # Covers "." and ".." as well as dotfiles like ".env".
    if title.startswith("."):
        raise InvalidTitleError("Title must not start with a dot")

    normalized = title.lower()
    try:
        encoded = normalized.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidTitleError("Title must be valid text") from exc

    if len(encoded) > MAX_TITLE_BYTES:
        raise InvalidTitleError(
            f"Title must be at most {MAX_TITLE_BYTES} bytes when encoded as UTF-8"
        )

    return normalized
