from twinfinder.core.models import HashAlgorithmName, SortOrder

ALGORITHM_ALIASES = {
    "twin": HashAlgorithmName.TWIN,
    "xxh128": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content fingerprint algorithm:\n"
    "  twin    : built-in 128-bit TwinHash (default)\n"
    "  xxh128  : xxHash3 128-bit (much faster on large files)\n"
)

SORT_ALIASES = {
    "first-found": SortOrder.FIRST_FOUND,
    "shortest-path": SortOrder.SHORTEST_PATH,
    "shortest-filename": SortOrder.SHORTEST_FILENAME,
    "lexical": SortOrder.LEXICAL,
}

SORT_CHOICES = list(SORT_ALIASES.keys())

SORT_HELP_TEXT = (
    "Which file of each duplicate group is kept:\n"
    "  first-found        : first file met during the scan (default)\n"
    "  shortest-path      : file closest to the root\n"
    "  shortest-filename  : file with the shortest name\n"
    "  lexical            : alphabetically smallest path\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads folder
  %(prog)s -i ~/Downloads

  Keep the copy closest to the root and move the others to trash (with confirmation prompt)
  %(prog)s -i ~/Downloads --sort shortest-path --trash

  Same as above but without confirmation (for scripts)
  %(prog)s -i ~/Downloads --sort shortest-path --trash --force > ~/Downloads/report.txt
"""
