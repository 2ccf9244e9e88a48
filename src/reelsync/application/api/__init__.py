"""
Session API: input event handling and structured results.
"""
from reelsync.application.api.result_types import CommandResult, ResultStatus
from reelsync.application.api.editor_session import EditorSession

__all__ = [
    'CommandResult',
    'ResultStatus',
    'EditorSession',
]
