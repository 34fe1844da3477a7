"""Clickable segment composition.

Hides how the one interactive region of a message is located and how the
message is reassembled around it. A message such as

    "&7Click &a@here@&7 to continue"

becomes the translated prefix, a single fragment showing "here" that runs
the caller's command when clicked, and the translated suffix.
"""

import logging
from typing import NamedTuple

from .colors import DEFAULT_CLICK_DELIMITER, DEFAULT_COLOR_CHAR
from .models import StyledFragment, TextStyle
from .translator import translate_to_fragments

logger = logging.getLogger(__name__)


class ClickRegion(NamedTuple):
    """Location of the first delimited region in a message."""

    start: int  # Index of the opening delimiter
    end: int    # Index just past the closing delimiter
    text: str   # Text strictly between the delimiters


def find_click_region(message: str, delimiter: str = DEFAULT_CLICK_DELIMITER) -> ClickRegion | None:
    """Find the first delimiter and the next one after it.

    Returns None when the message has fewer than two delimiters.
    """
    if not delimiter:
        return None
    start = message.find(delimiter)
    if start == -1:
        return None
    inner_start = start + len(delimiter)
    close = message.find(delimiter, inner_start)
    if close == -1:
        return None
    return ClickRegion(start=start, end=close + len(delimiter), text=message[inner_start:close])


def _command_fragment(text: str, command: str, color_char: str) -> StyledFragment:
    """Build the single clickable fragment for the bound text.

    A fragment carries one style, so only the style of the first run is
    kept; later codes inside the region are stripped without effect.
    """
    fragments = translate_to_fragments(text, color_char)
    style = fragments[0].style if fragments else TextStyle()
    display = "".join(fragment.text for fragment in fragments)
    return StyledFragment(text=display, style=style).with_click_action(command)


def insert_command_in_message(
    message: str,
    command: str,
    *,
    color_char: str = DEFAULT_COLOR_CHAR,
    delimiter: str = DEFAULT_CLICK_DELIMITER,
) -> list[StyledFragment]:
    """Insert a clickable segment into a message.

    Only the first delimited region becomes clickable; later delimiters are
    kept as literal text in the suffix. The displayed text of the clickable
    fragment is the region's text, but the command it runs is ``command``.
    Style codes inside the region are reduced to one style: the style of
    its first run wins, so "@&aYes&r, &cplease@" shows entirely green.

    Args:
        message: Message with an optional "@text@" region
        command: Command run when the region is clicked
        color_char: Marker for alternate color codes
        delimiter: Marker bounding the clickable region

    Returns:
        Prefix fragments, the clickable fragment and suffix fragments, in
        message order. Without a region the whole message is translated and
        nothing is clickable.
    """
    region = find_click_region(message, delimiter)
    if region is None:
        logger.debug("No click region in message; formatting without action")
        return translate_to_fragments(message, color_char)

    prefix = translate_to_fragments(message[:region.start], color_char)
    suffix = translate_to_fragments(message[region.end:], color_char)
    clickable = _command_fragment(region.text, command, color_char)

    logger.debug(
        "Bound %r to click region %d:%d", command, region.start, region.end
    )
    return [*prefix, clickable, *suffix]
