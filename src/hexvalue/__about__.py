# hexvalue/__about__.py

APP_NAME        = "hexvalue"
APP_TITLE       = "Immutable hex byte values"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
LOGGER_NAME     = APP_NAME


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE", "LOGGER_NAME",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_NAME} - {APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}"
    )
