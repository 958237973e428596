"""Chemistry practice: solved problems, a periodic table, quiz games, menus and learning statistics."""

__version__ = "0.1.0"