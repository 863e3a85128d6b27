"""Single-user web file browser with ad-hoc share links."""

__version__ = "1.0.0"
