import asyncio
import json
from typing import Any, Dict, List

from design_bridge.bridge import PluginBridge
from design_bridge.host import DesignHost
from design_bridge.scene import dump_scene, serialize_nodes

# Layout constants for the sample card (adjust as needed)
CARD_X = 40
CARD_Y = 40
CARD_WIDTH = 320
CARD_HEIGHT = 180
PADDING = 24


def generate_card_scene(title: str, body: str) -> List[Dict[str, Any]]:
    """
    Builds the scene JSON for a simple card: background, accent dot, title and body text.
    """
    return [
        {
            "type": "RECTANGLE",
            "name": "Card background",
            "node": {
                "position": {"x": CARD_X, "y": CARD_Y},
                "color": {"r": 1, "g": 1, "b": 1},
                "width": CARD_WIDTH,
                "height": CARD_HEIGHT,
                "cornerRadius": 12,
                "strokeWeight": 1,
                "dropShadow": 4,
            },
        },
        {
            "type": "ELLIPSE",
            "name": "Accent",
            "node": {
                "position": {"x": CARD_X + PADDING, "y": CARD_Y + PADDING},
                "color": {"r": 0.2, "g": 0.4, "b": 1},
                "width": 16,
                "height": 16,
            },
        },
        {
            "type": "TEXT",
            "name": "Title",
            "text": {
                "content": title,
                "fontSize": 20,
                "fontName": {"family": "Inter", "style": "Bold"},
                "position": {"x": CARD_X + PADDING + 28, "y": CARD_Y + PADDING - 4},
            },
        },
        {
            "type": "TEXT",
            "name": "Body",
            "text": {
                "content": body,
                "fontSize": 14,
                "color": {"r": 0.2, "g": 0.2, "b": 0.2},
                "position": {"x": CARD_X + PADDING, "y": CARD_Y + PADDING + 40},
            },
        },
    ]


async def main():
    host = DesignHost()
    bridge = PluginBridge(host)
    scene = generate_card_scene("Weekly report", "Revenue is up 12% week over week.")
    frame = await bridge.handle_message({"type": "render", "json": json.dumps(scene)})
    if frame is None:
        print(f"Render failed: {host.notifications[-1].message}")
        return
    # Round-trip what was drawn back into scene JSON
    print(json.dumps(dump_scene(serialize_nodes(frame.children)), indent=2))

if __name__ == "__main__":
    asyncio.run(main())
