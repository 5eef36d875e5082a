"""
Pydantic data models for the `libraries` section of a version manifest.

A library names its main artifact and, for libraries with native code, one
classifier per operating system. Rules restrict a library to some platforms:

{
  "name": "org.lwjgl:lwjgl:3.3.3",
  "downloads": {
    "artifact": {"path": "...", "sha1": "...", "size": 1, "url": "..."},
    "classifiers": {"natives-linux": {...}}
  },
  "natives": {"linux": "natives-linux"},
  "rules": [{"action": "allow", "os": {"name": "linux"}}]
}
"""

import platform
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OsName(str, Enum):
    """Operating systems named by library rules and natives."""

    LINUX = "linux"
    WINDOWS = "windows"
    OSX = "osx"

    @classmethod
    def current(cls) -> "OsName":
        """
        The operating system this interpreter runs on. Systems that are not
        Windows or macOS are treated as Linux.
        """
        system = platform.system()
        if system == "Windows":
            return cls.WINDOWS
        if system == "Darwin":
            return cls.OSX
        return cls.LINUX

    def is_current(self) -> bool:
        return self == OsName.current()


class RuleAction(str, Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"


class OsRule(BaseModel):
    """Operating system condition of a rule."""

    name: OsName

    model_config = ConfigDict(extra="ignore")

    def allows(self) -> bool:
        return self.name.is_current()


class Rule(BaseModel):
    """
    A single platform rule.

    An `allow` rule without an os allows everywhere; with an os it allows only
    on that os. A `disallow` rule without an os disallows everywhere; with an os
    it disallows only on that os.
    """

    action: RuleAction
    os: Optional[OsRule] = None

    model_config = ConfigDict(extra="ignore")

    def allows(self) -> bool:
        if self.action == RuleAction.ALLOW:
            return self.os is None or self.os.allows()
        return self.os is not None and not self.os.allows()


class LibraryDownload(BaseModel):
    """A downloadable library jar."""

    path: str = Field(..., description="Path of the jar relative to the libraries directory")
    sha1: str
    size: int
    url: str


class LibraryDownloads(BaseModel):
    artifact: LibraryDownload
    classifiers: Dict[str, LibraryDownload] = Field(default_factory=dict)


class LibraryExtractInstructions(BaseModel):
    """Entries to leave out when unpacking a natives jar."""

    exclude: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.exclude


class Library(BaseModel):
    """
    A library the game needs on its classpath.
    """

    downloads: LibraryDownloads
    extract: LibraryExtractInstructions = Field(default_factory=LibraryExtractInstructions)
    name: str
    natives: Dict[OsName, str] = Field(default_factory=dict)
    rules: List[Rule] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def is_allowed(self) -> bool:
        """Check if every rule allows the library on the current platform."""
        return all(rule.allows() for rule in self.rules)

    def artifact(self) -> LibraryDownload:
        return self.downloads.artifact

    def native(self) -> Optional[LibraryDownload]:
        """
        Get the natives classifier for the current platform.

        Returns:
            LibraryDownload or None if the library has no natives for this platform
        """
        natives_key = self.natives.get(OsName.current())
        if natives_key is None:
            return None
        return self.downloads.classifiers.get(natives_key)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the manifest's JSON layout, leaving out empty extract
        instructions, natives, rules and classifiers.
        """
        data = self.model_dump(mode="json", exclude_none=True)
        if self.extract.is_empty():
            data.pop("extract")
        for key in ("natives", "rules"):
            if not data[key]:
                data.pop(key)
        if not data["downloads"]["classifiers"]:
            data["downloads"].pop("classifiers")
        return data
