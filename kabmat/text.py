"""Small text helpers shared by the data layer and the screens."""

LABEL_LIMIT = 11
LABEL_KEEP = 9


def trim_spaces(text):
    """Strip space characters (only ' ') from both ends of ``text``."""
    return text.strip(" ")


def fit_text(text, width):
    """Shorten ``text`` with a trailing ".." so it fits a box ``width`` wide.

    Text longer than ``width - 2`` is cut to ``width - 4`` characters
    followed by "..". Boxes narrower than four columns keep the whole text.
    """
    if width < 2 or len(text) <= width - 2:
        return text
    keep = width - 4 if width >= 4 else len(text)
    return text[:keep] + ".."


def center_text(text, width):
    """Fit ``text`` into ``width`` columns and return ``(x, fitted_text)``.

    ``x`` is the column at which the fitted text starts when centred.
    """
    fitted = fit_text(text, width)
    return width // 2 - len(fitted) // 2, fitted


def shorten_label(text):
    """Shorten a name for use in a confirmation message."""
    if len(text) > LABEL_LIMIT:
        return text[:LABEL_KEEP] + ".."
    return text