"""Column width rules shared by the bar renderer and the report assembler."""

from .errors import ConfigurationError


# Two cells per golfer: one for any real score, one more for gold
MIN_SCORE_BAR_WIDTH = 4
# One visible character plus the trailing margin
MIN_HOLE_NAME_WIDTH = 2
NAME_MARGIN = 1


def effective_bar_width(configured: int) -> int:
    """Return the bar width actually used for a configured width.

    The bar is split into two equal halves around the seam, so an odd
    width is bumped to the next even number. The result applies to every
    row of a report.

    Raises:
        ConfigurationError: if the adjusted width cannot hold a bar.
    """
    width = configured + 1 if configured % 2 else configured
    if width < MIN_SCORE_BAR_WIDTH:
        raise ConfigurationError(
            f"Score bar width {configured} is too narrow "
            f"(minimum {MIN_SCORE_BAR_WIDTH})")
    return width


def check_hole_name_width(width: int) -> int:
    if width < MIN_HOLE_NAME_WIDTH:
        raise ConfigurationError(
            f"Hole name width {width} is too narrow "
            f"(minimum {MIN_HOLE_NAME_WIDTH})")
    return width


def fit_name(name: str, width: int) -> str:
    """Left-justify a hole name to exactly ``width`` columns.

    Long names are cut so at least NAME_MARGIN trailing spaces remain.
    """
    return name[:width - NAME_MARGIN].ljust(width)
