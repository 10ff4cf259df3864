"""
Interaction layer: the conversational behaviour between transport and resolution core.
"""
from .replies import Button, Reply, MARKDOWN
from .resolution_flow import ResolutionFlow

__all__ = ["Button", "Reply", "MARKDOWN", "ResolutionFlow"]
