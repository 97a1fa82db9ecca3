"""file-contents - Aggregate source files into one block of text.

Collects the contents of selected files (by extension, optionally scoped
to Git working-tree changes) and prints them or copies them to the clipboard.
"""

__version__ = "0.1.0"
