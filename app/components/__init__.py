# app/components - Reusable UI components
from .model_viewer import render_3d_model
from .metrics_panel import render_metrics_panel, render_skipped_table

__all__ = [
    'render_3d_model',
    'render_metrics_panel',
    'render_skipped_table',
]
