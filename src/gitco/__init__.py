"""Interactive git branch switcher.

Features:
- List local (and optionally remote) branches, numbered
- Filter the list without changing the numbers
- Check out a branch by number, or master with M
"""

__version__ = "0.3.0"
