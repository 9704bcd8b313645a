from .menu import MenuService, SelectionError
from .guide import CulturalGuide, get_cultural_guide

__all__ = ["MenuService", "SelectionError", "CulturalGuide", "get_cultural_guide"]
