"""Render collaborators for displaying the particle cloud."""

from protodisk.render.base import Renderer
from protodisk.render.renderer_3d import Renderer3D

__all__ = ["Renderer", "Renderer3D"]
