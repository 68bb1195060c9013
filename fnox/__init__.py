"""Secret management helpers: provider authentication prompts and CLI ordering checks."""

__version__ = "1.13.0"
__all__ = ["auth_prompt", "clap_sort"]