"""Router calldata: action planning and parsing."""

from v4sdk.planner.actions import Actions, Subparser, V4_BASE_ACTIONS_ABI_DEFINITION
from v4sdk.planner.parser import Param, V4RouterAction, V4RouterCall, parse_calldata
from v4sdk.planner.planner import V4Planner
from v4sdk.planner.position import V4PositionPlanner

__all__ = [
    "Actions",
    "Subparser",
    "V4_BASE_ACTIONS_ABI_DEFINITION",
    "V4Planner",
    "V4PositionPlanner",
    "Param",
    "V4RouterAction",
    "V4RouterCall",
    "parse_calldata",
]
