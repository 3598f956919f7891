"""
FrameView - 3D Structure Viewer

Upload a workbook with a members sheet ("Start Node", "End Node") and a
nodes sheet ("Node", "X", "Y", "Z") to view the frame in 3D.

Run with:
    streamlit run app/main.py
"""

import logging
import streamlit as st
import sys
from pathlib import Path
import pandas as pd

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from state import get_viewer_state, set_viewer_state, get_upload_token, set_upload_token
from services import SceneService, ExportService
from services.scene_service import compute_frame_metrics
from components import render_3d_model, render_metrics_panel, render_skipped_table

logging.basicConfig(level=CONFIG.log_level, format=CONFIG.log_format)
logger = logging.getLogger(__name__)

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🏗️",
    layout="wide",
    initial_sidebar_state="expanded",
)


# =============================================================================
# SIDEBAR - Upload and Display Options
# =============================================================================

with st.sidebar:
    st.title(f"🏗️ {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    uploaded = st.file_uploader(
        "Structure workbook",
        type=CONFIG.upload_types,
        help="Sheet 1: Start Node, End Node. Sheet 2: Node, X, Y, Z.",
    )

    if uploaded is not None:
        data = uploaded.getvalue()
        token = SceneService.upload_token(uploaded.name, data)
        # Only reparse when a different file arrives; reruns keep the state
        if token != get_upload_token():
            logger.info(f"Processing upload: {uploaded.name} ({len(data)} bytes)")
            set_viewer_state(SceneService.load_upload(uploaded.name, data))
            set_upload_token(token)

    st.divider()

    st.markdown("**Display**")
    show_nodes = st.checkbox("Node points", value=True)
    show_endpoints = st.checkbox("Endpoint cubes", value=True)
    show_axes = st.checkbox("Axes helper", value=True)

    with st.expander("ℹ️ Help", expanded=False):
        st.markdown("""
        - The first sheet lists members, one per row.
        - The second sheet lists node coordinates.
        - Non-numeric coordinates are read as 0.
        - Members pointing at unknown nodes are skipped.
        - Cubes mark nodes connected to a single member.
        """)


# =============================================================================
# MAIN AREA
# =============================================================================

state = get_viewer_state()

st.header(CONFIG.app_subtitle)

if state.error:
    st.error(state.error)
elif state.message:
    st.success(state.message)

if state.has_data:
    scene = SceneService.build_scene(state)
    metrics = compute_frame_metrics(state, scene)

    col_3d, col_metrics = st.columns([3, 1])

    with col_3d:
        fig = render_3d_model(
            scene,
            height=CONFIG.viewer_height,
            show_nodes=show_nodes,
            show_endpoints=show_endpoints,
            show_axes=show_axes,
        )
        st.plotly_chart(fig, use_container_width=True, key="main_3d")
        st.caption("Drag to rotate, scroll to zoom, right-drag to pan.")

    with col_metrics:
        render_metrics_panel(metrics)

    render_skipped_table(scene)

    tab_members, tab_nodes, tab_export = st.tabs(["Members", "Nodes", "Export"])

    with tab_members:
        st.dataframe(
            pd.DataFrame([{'Start Node': m.start, 'End Node': m.end} for m in state.dataset.members]),
            hide_index=True,
            use_container_width=True,
        )

    with tab_nodes:
        st.dataframe(
            pd.DataFrame([{'Node': n.id, 'X': n.x, 'Y': n.y, 'Z': n.z} for n in state.dataset.nodes]),
            hide_index=True,
            use_container_width=True,
        )

    with tab_export:
        stem = Path(state.filename).stem if state.filename else "frame"
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.download_button(
                "Scene JSON",
                data=ExportService.generate_scene_json(scene),
                file_name=f"{stem}_scene.json",
                mime="application/json",
                use_container_width=True,
            )
        with col2:
            st.download_button(
                "Member list CSV",
                data=ExportService.generate_member_list_csv(scene),
                file_name=f"{stem}_members.csv",
                mime="text/csv",
                use_container_width=True,
            )
        with col3:
            st.download_button(
                "Skipped members CSV",
                data=ExportService.generate_skipped_csv(scene),
                file_name=f"{stem}_skipped.csv",
                mime="text/csv",
                disabled=not scene.skipped,
                use_container_width=True,
            )
        with col4:
            st.download_button(
                "Interactive HTML",
                data=ExportService.generate_scene_html(scene, title=stem),
                file_name=f"{stem}.html",
                mime="text/html",
                use_container_width=True,
            )
else:
    st.info("Upload an Excel file to visualize the 3D structure.")


# =============================================================================
# FOOTER
# =============================================================================
st.divider()
st.caption(f"{CONFIG.app_name} v{CONFIG.version} • {CONFIG.app_subtitle}")
