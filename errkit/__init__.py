"""errkit: walk, render and group nested error chains.

    from errkit import error_chain_description, grouping_id

    try:
        load_profile()
    except Exception as e:
        print(error_chain_description(e))
        print(grouping_id(e))
"""

from errkit.chain import (
    Catching,
    ChainWalkError,
    CycleDetected,
    ErrorChain,
    ErrorDescription,
    ErrorNode,
    MaxDepthExceeded,
    Throwable,
    cause,
    walk,
)
from errkit.messages import MessageCatalog, MessageResolver, user_friendly_message
from errkit.services import ChainReport, ErrorDiagnostics, chain_report, error_chain_description, grouping_id

__version__ = "0.3.0"

__all__ = [
    "Catching",
    "ChainReport",
    "ChainWalkError",
    "CycleDetected",
    "ErrorChain",
    "ErrorDescription",
    "ErrorDiagnostics",
    "ErrorNode",
    "MaxDepthExceeded",
    "MessageCatalog",
    "MessageResolver",
    "Throwable",
    "__version__",
    "cause",
    "chain_report",
    "error_chain_description",
    "grouping_id",
    "user_friendly_message",
    "walk",
]
