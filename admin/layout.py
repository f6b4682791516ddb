"""Collapsible admin shell layout.

The shell is the page chrome shared by every admin page: a sidebar region
and a fluid content region hosting the routed child view. It owns exactly
one piece of state, whether the sidebar is collapsed, and derives the
content inset from it.

Both collaborators are injected:
- the sidebar is called with `(collapsed, on_toggle)` and returns markup
- the routed content is called with the current `Route` and returns markup

The page title is not written to any document. `mount()` returns it as a
`HeadEffect` and every rendered frame carries it, so the caller decides
where it goes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shared.types import SidebarState

from .config import DEFAULT_PAGE_TITLE
from .outlet import Route

if TYPE_CHECKING:
    from .config import AdminConfig

logger = logging.getLogger(__name__)

SidebarView = Callable[[bool, Callable[[], None]], str]
RoutedContent = Callable[[Route], str]

WIDE_OFFSET = "ml-64"
NARROW_OFFSET = "ml-16"


class LayoutNotMounted(RuntimeError):
    """The layout was used before mount() or after unmount()."""


@dataclass(frozen=True)
class HeadEffect:
    """A declared change to the document head.

    Attributes:
        name: Head field being set. Only "title" is declared by the shell.
        value: Field value.
    """

    name: str
    value: str

    @classmethod
    def title(cls, value: str) -> HeadEffect:
        return cls(name="title", value=value)


@dataclass(frozen=True)
class LayoutFrame:
    """One rendered snapshot of the shell.

    `state` and `content_offset` are read from the same snapshot, so a frame
    never pairs a collapsed sidebar with the wide inset or vice versa.
    """

    state: SidebarState
    content_offset: str
    sidebar: str
    content: str
    head: tuple[HeadEffect, ...]

    @property
    def collapsed(self) -> bool:
        return self.state is SidebarState.collapsed

    @property
    def title(self) -> str | None:
        for effect in self.head:
            if effect.name == "title":
                return effect.value
        return None


class AdminShellLayout:
    """Two-region admin chrome with a collapsible sidebar.

    Lifecycle:
        1. Created with its sidebar and routed content collaborators
        2. mount() resets to expanded and declares the page title
        3. render(route) any number of times; the sidebar may call the
           toggle callback it was given
        4. unmount() discards the state

    Toggling is synchronous and every call counts: after n toggles from
    mount the sidebar is collapsed iff n is odd.
    """

    def __init__(
        self,
        sidebar: SidebarView,
        content: RoutedContent,
        *,
        title: str = DEFAULT_PAGE_TITLE,
        wide_offset: str = WIDE_OFFSET,
        narrow_offset: str = NARROW_OFFSET,
    ) -> None:
        """Initialize an unmounted layout.

        Args:
            sidebar: Navigation sidebar collaborator
            content: Routed content collaborator
            title: Page title declared on mount
            wide_offset: Content inset while expanded
            narrow_offset: Content inset while collapsed
        """
        self._sidebar = sidebar
        self._content = content
        self._title = title
        self._offsets = {
            SidebarState.expanded: wide_offset,
            SidebarState.collapsed: narrow_offset,
        }
        self._state = SidebarState.expanded
        self._head: tuple[HeadEffect, ...] = ()
        self._mounted = False

    @classmethod
    def from_config(
        cls,
        config: AdminConfig,
        sidebar: SidebarView,
        content: RoutedContent,
    ) -> AdminShellLayout:
        return cls(
            sidebar,
            content,
            title=config.page_title,
            wide_offset=config.wide_offset,
            narrow_offset=config.narrow_offset,
        )

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def state(self) -> SidebarState:
        """Current sidebar state."""
        return self._state

    @property
    def collapsed(self) -> bool:
        return self._state is SidebarState.collapsed

    @property
    def content_offset(self) -> str:
        """Content inset for the current state."""
        return self._offsets[self._state]

    @property
    def head_effects(self) -> tuple[HeadEffect, ...]:
        """Head effects declared by the current mount (empty when unmounted)."""
        return self._head

    def mount(self) -> tuple[HeadEffect, ...]:
        """Mount the layout and declare its head effects.

        Mounting an already mounted layout is a no-op and returns the same
        effects, so the title is declared exactly once per mount.

        Returns:
            The declared head effects.
        """
        if self._mounted:
            return self._head

        self._state = SidebarState.expanded
        self._head = (HeadEffect.title(self._title),)
        self._mounted = True
        logger.debug("Admin layout mounted")
        return self._head

    def unmount(self) -> None:
        """Discard layout state. Idempotent."""
        if not self._mounted:
            return
        self._mounted = False
        self._state = SidebarState.expanded
        self._head = ()
        logger.debug("Admin layout unmounted")

    def toggle(self) -> None:
        """Flip the sidebar between expanded and collapsed.

        This is the zero-argument callback handed to the sidebar.

        Raises:
            LayoutNotMounted: If called outside a mount.
        """
        self._require_mounted()
        self._state = SidebarState.from_flag(not self.collapsed)
        logger.debug("Admin sidebar %s", self._state.value)

    def render(self, route: Route) -> LayoutFrame:
        """Render the shell around the child view matched for route.

        Errors raised by the routed content collaborator propagate unchanged.

        Raises:
            LayoutNotMounted: If called outside a mount.
        """
        self._require_mounted()

        state = self._state
        sidebar = self._sidebar(state is SidebarState.collapsed, self.toggle)
        content = self._content(route)

        return LayoutFrame(
            state=state,
            content_offset=self._offsets[state],
            sidebar=sidebar,
            content=content,
            head=self._head,
        )

    def _require_mounted(self) -> None:
        if not self._mounted:
            raise LayoutNotMounted("Admin layout is not mounted")
