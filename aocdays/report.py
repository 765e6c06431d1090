"""Console report helpers: banners, fixed-width tables and time formatting."""

import sys
import time

TIME_SPEC = "%H:%M:%S"
DATE_SPEC = "%Y-%m-%d"

_NANOS_PER_SECOND = 1_000_000_000
_FRACTION_DIGITS = 9
_INDEX_WIDTH = 4


def group_thousands(value):
    """Render a value for a report cell: integers grouped by commas, booleans as words."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


def print_banner(title, width=78, out=None):
    """Write a title framed by two dashed rules of the given width."""
    out = sys.stdout if out is None else out
    rule = "-" * width
    out.write(f"\n{rule}\n{group_thousands(title):<{width}}\n{rule}\n")


class Table:
    """A fixed-width text table with an optional running index column."""

    def __init__(self, columns, width, indexed=False, out=None):
        self.columns = columns
        self.width = width
        self.indexed = indexed
        self.out = sys.stdout if out is None else out
        self.index = 1

    def _cells(self, values):
        body = "".join(f"|{group_thousands(value):<{self.width}}" for value in values)
        return body + "|\n"

    def separator(self):
        """Write a horizontal rule as wide as a full row."""
        tail = self.columns + _INDEX_WIDTH if self.indexed else self.columns - 1
        self.out.write("|" + "-" * (self.width * self.columns + tail) + "|\n")

    def header(self, *args):
        """Write a header row between two rules and restart the index."""
        self.separator()
        prefix = "|" + " " * _INDEX_WIDTH if self.indexed else ""
        self.out.write(prefix + self._cells(args))
        self.separator()
        self.index = 1

    def row(self, *args):
        """Write a data row, numbered when the table is indexed."""
        prefix = ""
        if self.indexed:
            prefix = f"|{group_thousands(self.index):<{_INDEX_WIDTH}}"
            self.index += 1
        self.out.write(prefix + self._cells(args))


def _with_fraction(stamp, fraction):
    return f"{stamp}.{fraction:0{_FRACTION_DIGITS}d}"


def format_elapsed(nanoseconds, spec=TIME_SPEC):
    """Format a duration in nanoseconds as a clock time with nine fractional digits."""
    if nanoseconds < 0:
        raise ValueError("elapsed time cannot be negative")
    seconds, fraction = divmod(nanoseconds, _NANOS_PER_SECOND)
    return _with_fraction(time.strftime(spec, time.gmtime(seconds)), fraction)


def format_time(spec=TIME_SPEC):
    """Format the current local time with nanosecond fraction."""
    seconds, fraction = divmod(time.time_ns(), _NANOS_PER_SECOND)
    return _with_fraction(time.strftime(spec, time.localtime(seconds)), fraction)


def format_date(spec=DATE_SPEC):
    """Format the current UTC date."""
    return time.strftime(spec, time.gmtime())


def format_datetime(date_spec=DATE_SPEC, time_spec=TIME_SPEC, sep="T"):
    """Join the current date and time with a separator."""
    return format_date(date_spec) + sep + format_time(time_spec)