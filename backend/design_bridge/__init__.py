"""
Design bridge package.

Turns JSON scene descriptions into design-tool nodes and back, and exposes a
small HTTP surface around it:

1. A scene model (tagged union of rectangle, ellipse, text, group and frame nodes)
2. A builder and serializer that talk to the host design tool's node API
3. A plugin message bridge (render / save) and prompt-forwarding endpoints
"""

__version__ = "0.1.0"
