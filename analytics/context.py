from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LibraryInfo(BaseModel):
    """
    Identity of the library that produced an event.
    """

    name: str = ""
    version: str = ""


class AppInfo(BaseModel):
    """
    Identity of the application embedding the client.
    """

    name: str = ""
    version: str = ""
    build: str = ""
    namespace: str = ""


class Context(BaseModel):
    """
    Shared metadata attached to every outgoing event unless overridden
    per event.
    """

    model_config = ConfigDict(populate_by_name=True)

    app: Optional[AppInfo] = None
    library: LibraryInfo = Field(default_factory=LibraryInfo)
    ip: str = ""
    locale: str = ""
    timezone: str = ""
    user_agent: str = Field(default="", alias="userAgent")
    traits: Dict[str, Any] = Field(default_factory=dict)
    extra: Dict[str, Any] = Field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """
        Convert to the wire representation, with camelCase keys and empty
        values dropped. ``extra`` entries are merged at the top level.

        Returns:
            Dict[str, Any]: Dictionary representation of the context
        """
        result = self.model_dump(
            by_alias=True, exclude={"extra"}, exclude_defaults=True
        )
        result.update(self.extra)
        return result
