"""
Frame summary panel component.
"""

import pandas as pd
import streamlit as st
from typing import Dict, Any

from frame_viewer.scene import Scene


def render_metrics_panel(metrics: Dict[str, Any]) -> None:
    """
    Render a panel with frame statistics.
    
    Parameters:
    -----------
    metrics : Dict
        Output of compute_frame_metrics()
    """
    st.subheader("Structure")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Members", metrics.get('n_members', 0))
    with cols[1]:
        st.metric("Nodes", metrics.get('n_nodes', 0))
    with cols[2]:
        st.metric("Endpoints", metrics.get('n_endpoints', 0))
    
    st.subheader("Rendering")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Drawn", metrics.get('n_drawn', 0))
    with cols[1]:
        st.metric("Unresolved", metrics.get('n_unresolved', 0))
    with cols[2]:
        st.metric("Zero length", metrics.get('n_degenerate', 0))
    
    st.subheader("Geometry")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Total Length", f"{metrics.get('total_length', 0):.2f}")
    with cols[1]:
        st.metric("Longest", f"{metrics.get('max_member_length', 0):.3f}")
    with cols[2]:
        st.metric("Shortest", f"{metrics.get('min_member_length', 0):.3f}")


def render_skipped_table(scene: Scene) -> None:
    """List members that were left out of the 3D view."""
    if not scene.skipped:
        return
    
    df = pd.DataFrame([
        {'Start Node': s.member.start, 'End Node': s.member.end, 'Reason': s.reason}
        for s in scene.skipped
    ])
    with st.expander(f"Skipped members ({len(df)})", expanded=False):
        st.caption("'unresolved': a node identifier is not in the nodes sheet. "
                   "'degenerate': both nodes are at the same location.")
        st.dataframe(df, hide_index=True, use_container_width=True)
