"""Small helpers shared by the command line tools."""
import sys

VERBOSE = False


def vprint(text, level=0):
    """Print progress text to stderr if verbose mode is enabled.

    Parameters
    ----------
    text : str
        Text to print.
    level : int, optional
        Indentation level, by default 0.
    """
    if VERBOSE:
        print("  " * level + str(text), file=sys.stderr)
