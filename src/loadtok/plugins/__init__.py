"""Extension layer — plugin system via pluggy.

Plugins contribute capabilities for their own record types.
INVARIANT: Plugin failures are warnings, never errors.
"""

from loadtok.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]
