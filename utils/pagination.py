# utils/pagination.py
"""
Board pagination and ayah-range labeling.

A surah is a flat, ordered sequence of verse segments. Long verses are split
into several consecutive segments, so a board boundary can fall in the middle
of a verse. The functions here slice the sequence into fixed-size boards and
build the "first-last" ayah label shown in the board header, e.g. ``12-22``
or ``12.2-22.1`` when the board starts or ends inside a split verse.

All functions are pure: they never mutate their arguments and keep no state
between calls.
"""
import math
from collections import OrderedDict
from dataclasses import dataclass

UNNUMBERED_VERSE = 0

@dataclass(frozen=True)
class PageWindow:
    start_index: int
    end_index: int
    page_count: int
    clamped_page: int

    @property
    def has_previous(self):
        return self.clamped_page > 1

    @property
    def has_next(self):
        return self.clamped_page < self.page_count

@dataclass(frozen=True)
class RangeLabel:
    start_label: str
    end_label: str
    total_ayahs: int

    @property
    def text(self):
        return f"{self.start_label}-{self.end_label} [{self.total_ayahs}]"

def _coerce_page(requested_page):
    """Turn whatever the navigation layer sent into an int, defaulting to 1."""
    if requested_page is None or isinstance(requested_page, bool):
        return 1
    try:
        return int(requested_page)
    except (TypeError, ValueError):
        return 1

def paginate(total, page_size, requested_page=1):
    """Resolve a 1-based page request against ``total`` items.

    Out-of-range and non-numeric requests are clamped instead of rejected.
    There is always at least one page, even for an empty sequence.

    Raises:
        ValueError: if ``page_size`` is smaller than 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    total = max(0, total)

    page_count = max(1, math.ceil(total / page_size))
    clamped_page = min(max(_coerce_page(requested_page), 1), page_count)
    start_index = (clamped_page - 1) * page_size
    end_index = min(start_index + page_size, total)

    return PageWindow(
        start_index=start_index,
        end_index=end_index,
        page_count=page_count,
        clamped_page=clamped_page,
    )

def page_for_start_index(start_index, page_size):
    """Return the 1-based page containing flat position ``start_index``."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return start_index // page_size + 1

def group_by_verse(segments):
    """Map each verse number to the flat positions of its segments.

    Positions keep input order, so the n-th entry of a group is part n of
    that verse. Segments without a verse number are collected under
    ``UNNUMBERED_VERSE``.
    """
    groups = OrderedDict()
    for position, segment in enumerate(segments):
        verse = segment.verse_number
        if verse is None:
            verse = UNNUMBERED_VERSE
        groups.setdefault(verse, []).append(position)
    return groups

def _label_at(segments, groups, position, is_start):
    segment = segments[position]
    if segment.verse_number is None:
        # No verse to split; fall back to the record's position in the file
        return str(segment.sequence_index)

    group = groups[segment.verse_number]
    part = group.index(position) + 1
    truncated = part > 1 if is_start else part < len(group)
    if truncated:
        return f"{segment.verse_number}.{part}"
    return str(segment.verse_number)

def label_range(segments, start_index, end_index, total_ayahs):
    """Build the ayah-range label for the board window ``[start_index, end_index)``.

    A part suffix is only shown where the window cuts a split verse: on the
    start label when the window begins after the verse's first segment, on
    the end label when it stops before the verse's last segment.

    Never raises; an empty sequence or a window past the end yields ``"0"``
    for both labels.
    """
    if not segments or start_index < 0 or start_index >= len(segments):
        return RangeLabel(start_label='0', end_label='0', total_ayahs=total_ayahs)

    last_pos = max(start_index, min(end_index - 1, len(segments) - 1))
    groups = group_by_verse(segments)

    return RangeLabel(
        start_label=_label_at(segments, groups, start_index, is_start=True),
        end_label=_label_at(segments, groups, last_pos, is_start=False),
        total_ayahs=total_ayahs,
    )
