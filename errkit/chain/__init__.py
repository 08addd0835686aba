"""Walking, rendering and grouping error chains."""

from .describe import Describable, WrapsCause, aggregate_kind, describe_error, wrapped_cause
from .grouping import grouping_id, hash_skeleton, skeleton
from .model import ErrorChain, ErrorDescription, ErrorNode
from .render import render, render_lines
from .throwable import Catching, Throwable, cause
from .walker import ChainWalkError, CycleDetected, MaxDepthExceeded, walk

__all__ = [
    # model
    "ErrorChain",
    "ErrorDescription",
    "ErrorNode",
    # describe
    "Describable",
    "WrapsCause",
    "aggregate_kind",
    "describe_error",
    "wrapped_cause",
    # throwable
    "Catching",
    "Throwable",
    "cause",
    # walker
    "ChainWalkError",
    "CycleDetected",
    "MaxDepthExceeded",
    "walk",
    # render
    "render",
    "render_lines",
    # grouping
    "grouping_id",
    "hash_skeleton",
    "skeleton",
]
