"""Filename classifier.

Turns a raw video filename into a MediaDescriptor using two regex patterns:
- SERIES_PATTERN: ``Title.S01E02[.quality]`` (season/episode are 1-2 digits).
- MOVIE_PATTERN: ``Title.2010[.quality]`` (year 1900-2099).

The series pattern is always tried first, so a name that satisfies both is
classified as a series episode. Patterns are anchored at the start of the name
and ignore anything after the last recognised token (release group, codec...).
"""

import logging
import re
from pathlib import Path
from typing import Union

from reelsort.errors import ClassificationError
from reelsort.models.core import QUALITY_TAGS, MediaDescriptor, MediaKind

logger = logging.getLogger(__name__)

_QUALITY = "|".join(QUALITY_TAGS)

SERIES_PATTERN = re.compile(
    rf"^(?P<title>.+?)[.\s]+S(?P<season>\d{{1,2}})[.\s]?E(?P<episode>\d{{1,2}})(?!\d)"
    rf"(?:[.\s]*(?P<quality>{_QUALITY})(?![a-z0-9]))?",
    re.IGNORECASE,
)
MOVIE_PATTERN = re.compile(
    rf"^(?P<title>.+?)[.\s]+(?P<year>(?:19|20)\d{{2}})(?!\d)"
    rf"(?:[.\s]+(?P<quality>{_QUALITY})(?![a-z0-9]))?",
    re.IGNORECASE,
)

# Case-insensitive matching may yield "bluray" or "1080P"; store the canonical tag.
_CANONICAL_QUALITY = {tag.lower(): tag for tag in QUALITY_TAGS}


def clean_title(title: str) -> str:
    """Normalize a raw title segment for display and lookup.

    Dots become spaces, every space-delimited word is capitalised (first letter
    upper, rest lower) and the result is trimmed.

    Example:
        >>> clean_title("the.matrix")
        'The Matrix'
    """
    words = title.replace(".", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words).strip()


def _canonical_quality(raw: str | None) -> str:
    if not raw:
        return ""
    return _CANONICAL_QUALITY[raw.lower()]


def classify(path: Union[str, Path]) -> MediaDescriptor:
    """Classify a video file by its name.

    Args:
        path: Path (or bare filename) of the file to classify. Only the final
            component is parsed; the full value is kept as the source path.

    Returns:
        A MediaDescriptor of kind SERIES or MOVIE with no target path yet.

    Raises:
        ClassificationError: If neither pattern matches or the parsed title is
            empty after normalization.
    """
    source = Path(path)
    extension = source.suffix
    name = source.name[: len(source.name) - len(extension)] if extension else source.name
    logger.debug("Parsing file: %s", source)

    match = SERIES_PATTERN.match(name)
    if match:
        title = clean_title(match.group("title"))
        if title:
            logger.debug("Matched series pattern")
            return MediaDescriptor(
                kind=MediaKind.SERIES,
                title=title,
                season=match.group("season"),
                episode=match.group("episode"),
                quality=_canonical_quality(match.group("quality")),
                extension=extension,
                source_path=source,
            )

    match = MOVIE_PATTERN.match(name)
    if match:
        title = clean_title(match.group("title"))
        if title:
            logger.debug("Matched movie pattern")
            return MediaDescriptor(
                kind=MediaKind.MOVIE,
                title=title,
                year=match.group("year"),
                quality=_canonical_quality(match.group("quality")),
                extension=extension,
                source_path=source,
            )

    raise ClassificationError(source.name)
