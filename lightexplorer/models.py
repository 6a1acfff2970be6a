"""Data handed to page templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from markupsafe import Markup

from .chain import ChainConfig


@dataclass
class Meta:
    """Metadata about a page."""

    title: str = ""
    description: str = ""
    domain: str = ""
    path: str = ""
    tlabel1: str = ""
    tdata1: str = ""
    tlabel2: str = ""
    tdata2: str = ""
    templates: str = ""


@dataclass
class NavigationLink:
    label: str = ""
    path: str = ""
    custom_icon: str = ""
    icon: str = ""
    is_hidden: bool = False
    is_highlighted: bool = False


@dataclass
class NavigationGroup:
    label: str = ""  # only shown for big groups
    links: list[NavigationLink] = field(default_factory=list)


@dataclass
class MainMenuItem:
    label: str = ""
    path: str = ""
    is_active: bool = False
    has_big_groups: bool = False
    groups: list[NavigationGroup] = field(default_factory=list)


@dataclass
class PageData:
    """Common data for every rendered page."""

    active: str = ""
    meta: Optional[Meta] = None
    data: Any = None
    version: str = ""
    year: int = 0
    explorer_title: str = ""
    explorer_subtitle: str = ""
    chain_slots_per_epoch: int = 0
    chain_seconds_per_slot: int = 0
    chain_genesis_timestamp: int = 0
    current_epoch: int = 0
    latest_finalized_epoch: int = 0
    current_slot: int = 0
    finalization_delay: int = 0
    mainnet: bool = False
    deposit_contract: str = ""
    info_banner: Optional[Markup] = None
    clients_updated: bool = False
    chain_config: ChainConfig = field(default_factory=ChainConfig)
    lang: str = ""
    no_ads: bool = False
    debug: bool = False
    debug_templates: list[str] = field(default_factory=list)
    main_menu_items: list[MainMenuItem] = field(default_factory=list)


@dataclass
class NamedValidator:
    """A validator index with an optional display name."""

    index: int = 0
    name: str = ""

    def to_json(self) -> dict:
        """Return the JSON form used by the API."""
        return {"index": self.index, "name": self.name}