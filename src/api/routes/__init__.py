from .guidance import router as guidance_router

__all__ = ["guidance_router"]
