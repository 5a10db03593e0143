"""Console front end with lazy exports to keep imports light."""
from tracking import t

__all__ = ["ConsoleMenu", "main"]


def __getattr__(name):
    t('consoleapp.__getattr__')
    if name == "ConsoleMenu":
        from .menu import ConsoleMenu as _ConsoleMenu

        return _ConsoleMenu
    if name == "main":
        from .app import main as _main

        return _main
    raise AttributeError(f"module 'consoleapp' has no attribute {name!r}")
