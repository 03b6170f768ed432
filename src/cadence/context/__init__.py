from .context import EXECUTION_CONTEXT, ExecutionContext, execution_scope

__all__ = [
    "EXECUTION_CONTEXT",
    "ExecutionContext",
    "execution_scope",
]
