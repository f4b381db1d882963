"""Icon catalog for language badges.

The default catalog is the Simple Icons set shipped by the `simpleicons`
package. Keys are lowercase Simple Icons slugs; the presentation layer renders
the icon itself. Java is not part of the set.
"""

from collections.abc import Mapping
from typing import Any
from typing import Protocol

from pydantic import BaseModel
from pydantic import ConfigDict
from simpleicons.all import icons as simple_icons


class Icon(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    hex: str

    @property
    def color(self) -> str:
        return f"#{self.hex}"


class IconCatalog(Protocol):
    def lookup(self, key: str) -> Icon | None: ...


class StaticIconCatalog:
    """Icon catalog backed by an in-memory mapping of slug to icon."""

    def __init__(self, icons: Mapping[str, Icon]) -> None:
        self._icons = {slug.lower(): icon for slug, icon in icons.items()}

    def lookup(self, key: str) -> Icon | None:
        if not key:
            return None
        return self._icons.get(key.lower())


class SimpleIconsCatalog:
    """Icon catalog over the `simpleicons` slug index."""

    def __init__(self, source: Any = simple_icons) -> None:
        self._source = source

    def lookup(self, key: str) -> Icon | None:
        if not key:
            return None
        icon = self._source.get(key.lower())
        if icon is None:
            return None
        return Icon(slug=icon.slug, title=icon.title, hex=icon.hex)


# Language names (lowercased) whose Simple Icons slug cannot be guessed from
# the name itself.
ICON_KEY_EXCEPTIONS: dict[str, str] = {
    "assembly": "assemblyscript",
    "c#": "dotnet",
    "c++": "cplusplus",
    "css": "css3",
    "dockerfile": "docker",
    "emacs lisp": "gnuemacs",
    "groovy": "apachegroovy",
    "html": "html5",
    "makefile": "gnu",
    "nix": "nixos",
    "scss": "sass",
    "shell": "gnu",
    "tex": "latex",
    "vim script": "vim",
    "vue": "vuedotjs",
}


DEFAULT_ICON_CATALOG = SimpleIconsCatalog()
