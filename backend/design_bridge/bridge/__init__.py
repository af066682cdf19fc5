from .plugin import PluginBridge

__all__ = ["PluginBridge"]
