from .figma_file import SCHEMA_VERSION, FigmaFile, FigmaNode, parse_figma_file
from .figma_import import scene_from_figma, scene_from_file

__all__ = [
    "SCHEMA_VERSION",
    "FigmaFile",
    "FigmaNode",
    "parse_figma_file",
    "scene_from_figma",
    "scene_from_file",
]
