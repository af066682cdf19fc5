#!/usr/bin/env python3
"""
Design File Fetcher
Downloads a file from the design API, validates it against the versioned file
schema and prints the scene the plugin would render for it.

Usage: python scripts/fetch_figma_file.py <file_id>
"""
import asyncio
import json
import sys

from dotenv import load_dotenv

from design_bridge.exceptions import SchemaValidationError, UpstreamError
from design_bridge.scene.models import dump_scene
from design_bridge.schema import scene_from_file
from design_bridge.services.figma_api import fetch_figma_file


async def run(file_id: str) -> int:
    try:
        document = await fetch_figma_file(file_id)
    except UpstreamError as e:
        print(f"Error fetching file {file_id} ({e.status_code}): {e.detail}")
        return 1
    except SchemaValidationError as e:
        print(f"File {file_id} does not match the file schema: {e}")
        return 1

    scene = scene_from_file(document)
    print(f"Fetched '{document.name}' (version {document.version}, last modified {document.lastModified}).")
    print(json.dumps(dump_scene(scene), indent=2))
    return 0


def main():
    load_dotenv()
    if len(sys.argv) != 2:
        print("Usage: fetch_figma_file.py <file_id>")
        sys.exit(2)
    sys.exit(asyncio.run(run(sys.argv[1])))

if __name__ == "__main__":
    main()
