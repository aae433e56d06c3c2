"""Layout API - full layout, positions only, sizes only, subtree height, config."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from layout import DEFAULT_CONFIG, LayoutEngine, MeasurementPolicy, compute_mind_map_layout, summarize_layout
from layout.extent import is_visible
from mindmap import InvalidTreeError, MindMapNode, validate_tree

from .. import state as api_state
from ..schemas import LayoutRequest, SizesRequest, SubtreeHeightRequest

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _build_tree(data: dict) -> MindMapNode:
    root = MindMapNode.from_data(data)
    validate_tree(root)
    return root


def _run_layout(body: LayoutRequest, policy: MeasurementPolicy):
    try:
        return compute_mind_map_layout(
            body.root,
            api_state.measurer,
            anchor_x=body.anchor_x,
            anchor_y=body.anchor_y,
            config=body.config,
            policy=policy,
        )
    except InvalidTreeError as e:
        logger.warning("Rejected mind map tree: {}", e)
        return _error(400, str(e))
    except ValueError as e:
        return _error(400, str(e) or "Invalid mind map")
    except Exception as e:
        logger.exception("Layout error")
        return _error(500, str(e) or "Failed to compute layout")


@router.post("")
def layout_route(body: LayoutRequest):
    """Measure and position every visible node."""
    return _run_layout(body, MeasurementPolicy.REMEASURE)


@router.post("/positions")
def layout_positions_route(body: LayoutRequest):
    """Reposition using the sizes already in the record."""
    return _run_layout(body, MeasurementPolicy.REUSE_EXISTING)


@router.post("/sizes")
def recalculate_sizes_route(body: SizesRequest):
    """Remeasure every node; positions are returned unchanged."""
    try:
        root = _build_tree(body.root)
        LayoutEngine(api_state.measurer, body.config).recalculate_sizes(root)
        return {"root": root.to_data(), "layout": summarize_layout(root)}
    except ValueError as e:
        logger.warning("Rejected mind map tree: {}", e)
        return _error(400, str(e) or "Invalid mind map")
    except Exception as e:
        logger.exception("Size recalculation error")
        return _error(500, str(e) or "Failed to recalculate sizes")


@router.post("/subtree-height")
def subtree_height_route(body: SubtreeHeightRequest):
    """Height of a node's visible subtree (record sizes) and whether the node is shown."""
    try:
        root = _build_tree(body.root)
    except ValueError as e:
        logger.warning("Rejected mind map tree: {}", e)
        return _error(400, str(e) or "Invalid mind map")
    node = root.find_node(body.node_id)
    if node is None:
        return _error(404, f"Node not found: {body.node_id}")
    height = LayoutEngine(api_state.measurer, body.config).get_subtree_height(node)
    return {"nodeId": node.id, "height": height, "visible": is_visible(node)}


@router.get("/config")
def get_config_route():
    """Effective default layout config (constants + env overrides)."""
    return {"config": DEFAULT_CONFIG.model_dump(by_alias=True)}
