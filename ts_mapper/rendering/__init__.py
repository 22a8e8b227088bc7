"""Rendering - turn a generated artifact into mapper source text."""

from __future__ import annotations

from ts_mapper.rendering.renderer import MapperRenderer, render

__all__ = ["MapperRenderer", "render"]
