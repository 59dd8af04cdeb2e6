"""TypeScript declaration renderers."""

from mssql_to_ts.core.schemas import RenderMode
from mssql_to_ts.rendering.database_renderer import DatabaseRenderer
from mssql_to_ts.rendering.legacy_renderer import LegacyRenderer
from mssql_to_ts.resolution.interfaces import ISchemaRenderer


def get_renderer(mode: RenderMode) -> ISchemaRenderer:
    """Return the renderer for a render mode.

    Raises:
        ValueError: If the mode is unknown
    """
    if mode == RenderMode.DATABASE:
        return DatabaseRenderer()
    if mode == RenderMode.LEGACY:
        return LegacyRenderer()
    raise ValueError(f"Unknown render mode: {mode}")


__all__ = ["DatabaseRenderer", "LegacyRenderer", "get_renderer"]
