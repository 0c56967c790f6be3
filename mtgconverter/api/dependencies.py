from fastapi import Request

from mtgconverter.services.workspace import ConverterWorkspace


def get_workspace(request: Request) -> ConverterWorkspace:
    """Dependency that provides the application's work session."""
    workspace: ConverterWorkspace = request.app.state.workspace
    return workspace
