"""alfred-firefox package.

Modules:
- alfred_firefox.cli: CLI entry point package (alfred-firefox)
- alfred_firefox.lib.core: Configuration, paths, version
- alfred_firefox.lib.browser: Firefox extension client and data models
- alfred_firefox.lib.ui: Clipboard and URL opening helpers
- alfred_firefox.lib: Actions, feedback rendering, updates, workflow context
"""

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("alfred-firefox")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
