"""maid - priority rolls and reordering for Markdown checklists."""

__version__ = "0.3.0"
