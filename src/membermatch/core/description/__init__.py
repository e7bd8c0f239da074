"""Method description functionality: the read-only metadata the matchers inspect."""

from membermatch.core.description.models import MethodDescription, Modifier
from membermatch.core.description.protocol import MethodDescriptor

__all__ = [
    # Models
    "MethodDescription",
    "Modifier",
    # Protocol
    "MethodDescriptor",
]
