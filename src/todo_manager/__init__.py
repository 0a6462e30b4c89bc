"""
todo-manager: a personal task tracker with a numbered console menu.

Packages:
- tasks/: task models, flat-file codec, in-memory task store
- core/: application state and ports
- cli/: entrypoint, bootstrap, menu commands
- connectors/: console loop
"""

__version__ = "0.1.0"
