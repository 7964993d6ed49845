import rerun as rr
import rerun.blueprint as rrb


# set rerun blueprint
def setup_rerun_blueprint(entity_path: str = "disparity/image"):
    blueprint = rrb.Horizontal(
        rrb.Spatial2DView(
            name="Disparity",
            origin=entity_path,
        ),
        rrb.TextDocumentView(
            name="Description",
            origin="/description"
            ),
        column_shares=[4, 1],
    )
    rr.send_blueprint(blueprint)


# log description to rerun
def log_description(topic: str, transport: str = "default"):
    description = f"""
    It visualizes the disparity images of a stereo camera ROSBAG.
    - **Topic**: `{topic}` (transport: {transport})
    - **Disparity**: false-color disparity (fixed 256-color table)
    - Gray pixels have no valid disparity
    - Frames without a disparity range keep the previous image
    """
    rr.log("description", rr.TextDocument(description, media_type=rr.MediaType.MARKDOWN), static=True)
