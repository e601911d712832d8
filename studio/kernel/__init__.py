"""
Club Studio Kernel — the customization engine.

Components:
  registry         — ComponentType / Trait → editable-property descriptors
  overrides        — sparse per-element override store (Update | Reset)
  resolver         — metadata building + render-time override resolution
  selectable       — boundary turning a rendered node into an inspectable target
  property_editor  — one typed control per editable property
  inspector        — docked / floating panels synced with the selection
  header           — predicted vs measured header height
  preview          — simulated phone renderer
  session          — per-project editor context tying it all together
"""

from studio.kernel.header import HeaderHeightPropagator, PushedLayoutSource, predict_header_height
from studio.kernel.inspector import DockedInspector, FloatingInspector
from studio.kernel.overrides import Reset, Update, apply, read, reset, write
from studio.kernel.preview import render_preview
from studio.kernel.registry import descriptors_for_trait, descriptors_for_type, merge_descriptors
from studio.kernel.resolver import build_metadata
from studio.kernel.selectable import ModifierKeySource, Selectable
from studio.kernel.session import EditorSession

__all__ = [
    "descriptors_for_type",
    "descriptors_for_trait",
    "merge_descriptors",
    "read",
    "write",
    "reset",
    "apply",
    "Update",
    "Reset",
    "build_metadata",
    "Selectable",
    "ModifierKeySource",
    "DockedInspector",
    "FloatingInspector",
    "HeaderHeightPropagator",
    "PushedLayoutSource",
    "predict_header_height",
    "render_preview",
    "EditorSession",
]
