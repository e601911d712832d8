"""
Club Studio Kernel — Preview Renderer

Renders the simulated phone (header + one screen) as HTML and registers a
Selectable boundary for every themeable leaf it emits.

Every leaf follows the same contract:
  1. Visibility: an explicit visible=False removes the leaf (and its
     boundary) when the inspector is off; with the inspector on it renders
     ghosted so it can still be selected.
  2. Content: the override's text, else the built-in default.
  3. Style: override styling goes into the style attribute, layered on top
     of the untouched base classes.

Output is a RenderResult: the HTML plus {element_id: Selectable}, where the
last registration for an id wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from studio.kernel.header import HEADER_ELEMENT_ID, HeaderHeightPropagator
from studio.kernel.markup import class_names, escape
from studio.kernel.overrides import OverrideStore, overrides_for
from studio.kernel.resolver import (
    header_background_image,
    header_gradient,
    is_hidden,
    resolve_image,
    resolve_text,
    style_for,
)
from studio.kernel.selectable import Selectable
from studio.kernel.types import ComponentType, RenderResult, Trait

logger = logging.getLogger(__name__)

GHOST_CLASSES = "opacity-30 grayscale"

TEXT_TRAITS = (Trait.CONTENT, Trait.TYPOGRAPHY, Trait.INTERACTION)

PAGES = ("home", "roster", "shop")

# Mock club data shown in the simulator
ROSTER = [
    {"id": 1, "name": "Marco Rossi", "role": "Goalkeeper", "number": 1},
    {"id": 2, "name": "Luca Bianchi", "role": "Defender", "number": 4},
    {"id": 3, "name": "Andrea Conti", "role": "Defender", "number": 5},
    {"id": 4, "name": "Paolo Greco", "role": "Midfielder", "number": 8},
    {"id": 5, "name": "Davide Ricci", "role": "Midfielder", "number": 10},
    {"id": 6, "name": "Simone Gallo", "role": "Midfielder", "number": 14},
    {"id": 7, "name": "Matteo Fontana", "role": "Forward", "number": 9},
    {"id": 8, "name": "Giorgio Costa", "role": "Forward", "number": 11},
]

SHOP_PRODUCTS = [
    {"name": "Home Kit 24/25", "price": "€89.90"},
    {"name": "Official Scarf", "price": "€19.90"},
    {"name": "Team Cap", "price": "€24.90"},
    {"name": "Training Backpack", "price": "€49.90"},
]

DEFAULT_WELCOME_TITLE = "Welcome to the Club Digital"
DEFAULT_WELCOME_SUBTITLE = "Your passion, everywhere."


def empty_theme() -> dict[str, Any]:
    """Theme configuration of a freshly created project."""
    return {
        "componentOverrides": {},
        "header": {},
        "navigationType": "bottom",
    }


def default_team() -> dict[str, Any]:
    return {
        "name": "FC Studio",
        "sportType": "Football",
        "colors": {"primary": "#2563eb", "secondary": "#1e40af"},
        "logo": "",
        "branding": {},
    }


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


@dataclass
class RenderContext:
    theme: dict[str, Any]
    team: dict[str, Any]
    inspector_active: bool = False
    selected_id: str | None = None
    boundaries: dict[str, Selectable] = field(default_factory=dict)

    @property
    def store(self) -> OverrideStore:
        return self.theme.get("componentOverrides") or {}

    def override(self, element_id: str) -> dict[str, Any]:
        return overrides_for(self.store, element_id)

    def omits(self, element_id: str) -> bool:
        """Hidden with the inspector off: render nothing, register nothing."""
        return is_hidden(self.override(element_id)) and not self.inspector_active

    def wrap(self, boundary: Selectable, inner: str) -> str:
        """Register a boundary and render it around `inner`."""
        self.boundaries[boundary.id] = boundary
        return boundary.render(
            inner,
            inspector_active=self.inspector_active,
            selected=self.selected_id == boundary.id,
            override=self.override(boundary.id),
        )


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


def render_leaf(
    ctx: RenderContext,
    element_id: str,
    *,
    default_text: str,
    label: str,
    component_type: ComponentType = ComponentType.TEXT,
    traits: tuple[Trait, ...] = TEXT_TRAITS,
    tag: str = "p",
    base_class: str = "",
    wrapper_class: str = "",
    path: str | None = None,
    action: str | None = None,
) -> str:
    """One overridable text leaf. Returns "" when hidden outside the inspector."""
    override = ctx.override(element_id)
    hidden = is_hidden(override)
    if ctx.omits(element_id):
        return ""

    classes = class_names(base_class, GHOST_CLASSES if hidden else None)
    style = style_for(override)
    style_attr = f' style="{escape(style)}"' if style else ""
    action_attr = f' data-action="{escape(action)}"' if action else ""
    text = escape(resolve_text(override, default_text))
    inner = f'<{tag} class="{escape(classes)}"{style_attr}{action_attr}>{text}</{tag}>'

    boundary = Selectable(
        id=element_id,
        type=component_type,
        label=label,
        traits=traits,
        path=path,
        class_name=wrapper_class,
        action=action,
    )
    return ctx.wrap(boundary, inner)


def render_icon_leaf(
    ctx: RenderContext,
    element_id: str,
    *,
    default_icon: str,
    label: str,
    base_class: str = "",
    wrapper_class: str = "",
    path: str | None = None,
    action: str | None = None,
) -> str:
    """
    An overridable icon. A custom icon URL renders as an image; an unusable
    one falls back to the named icon.
    """
    override = ctx.override(element_id)
    hidden = is_hidden(override)
    if ctx.omits(element_id):
        return ""

    classes = class_names(base_class, GHOST_CLASSES if hidden else None)
    style = style_for(override)
    style_attr = f' style="{escape(style)}"' if style else ""
    action_attr = f' data-action="{escape(action)}"' if action else ""

    custom_url = resolve_image(override, "customIconUrl")
    if custom_url:
        glyph = f'<img class="studio-icon-image" src="{escape(custom_url)}" alt="">'
    else:
        icon_name = override.get("icon") or default_icon
        fallback = " fallback-icon" if override.get("customIconUrl") else ""
        glyph = f'<i class="studio-icon{fallback}" data-lucide="{escape(icon_name)}"></i>'

    inner = f'<button type="button" class="{escape(classes)}"{style_attr}{action_attr}>{glyph}</button>'
    boundary = Selectable(
        id=element_id,
        type=ComponentType.ICON,
        label=label,
        traits=(Trait.INTERACTION,),
        path=path,
        class_name=wrapper_class,
        action=action,
    )
    return ctx.wrap(boundary, inner)


def render_card(
    ctx: RenderContext,
    element_id: str,
    children: str,
    *,
    label: str,
    base_class: str = "",
    path: str | None = None,
) -> str:
    """A card container. Its override styles the card surface."""
    override = ctx.override(element_id)
    hidden = is_hidden(override)
    if ctx.omits(element_id):
        return ""

    classes = class_names("studio-card", base_class, GHOST_CLASSES if hidden else None)
    style = style_for(override)
    style_attr = f' style="{escape(style)}"' if style else ""
    inner = f'<div class="{escape(classes)}"{style_attr}>{children}</div>'
    boundary = Selectable(
        id=element_id,
        type=ComponentType.CARD,
        label=label,
        traits=(Trait.BACKGROUND, Trait.BORDER),
        path=path,
    )
    return ctx.wrap(boundary, inner)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


def render_header(ctx: RenderContext, page: str, height: float) -> str:
    override = ctx.override(HEADER_ELEMENT_ID)
    start, end = header_gradient(override, ctx.theme, ctx.team)
    background = header_background_image(override, ctx.theme, ctx.team)

    parts = [
        '<div class="studio-header-layers">',
        f'<div class="studio-header-gradient" style="background: linear-gradient(135deg, {escape(start)}, {escape(end)})"></div>',
    ]
    if background:
        parts.append(f'<img class="studio-header-image" src="{escape(background)}" alt="Header Background">')
    parts.append("</div>")

    parts.append('<div class="studio-header-brand">')
    parts.append(_render_logo(ctx.team))
    parts.append(
        render_leaf(
            ctx,
            "header_team_name",
            default_text=ctx.team.get("name") or "",
            label="Team name (header)",
            tag="h1",
            base_class="text-sm font-black text-white uppercase",
            path="Header > Team name",
        )
    )
    parts.append(
        render_leaf(
            ctx,
            "header_sport_type",
            default_text=ctx.team.get("sportType") or "",
            label="Sport type (header)",
            base_class="text-[10px] font-bold text-white/70 uppercase",
            path="Header > Sport type",
        )
    )
    parts.append("</div>")

    if page == "home":
        parts.append('<div class="studio-header-welcome">')
        parts.append(
            render_leaf(
                ctx,
                "header_welcome_title",
                default_text=DEFAULT_WELCOME_TITLE,
                label="Welcome title",
                tag="h2",
                base_class="text-2xl font-black text-white",
                path="Header > Welcome > Title",
            )
        )
        parts.append(
            render_leaf(
                ctx,
                "header_welcome_subtitle",
                default_text=DEFAULT_WELCOME_SUBTITLE,
                label="Welcome subtitle",
                base_class="text-[10px] font-bold text-white/60 uppercase",
                path="Header > Welcome > Subtitle",
            )
        )
        parts.append("</div>")

    inner = (
        f'<header class="studio-header" style="height: {_px(height)}; min-height: {_px(height)}">'
        + "".join(parts)
        + "</header>"
    )
    boundary = Selectable(
        id=HEADER_ELEMENT_ID,
        type=ComponentType.HEADER,
        label="Main header",
        traits=(Trait.BACKGROUND, Trait.LAYOUT),
        path="Header",
        class_name="absolute top-0 left-0 right-0 z-40 overflow-hidden",
    )
    return ctx.wrap(boundary, inner)


def _render_logo(team: dict[str, Any]) -> str:
    logo = resolve_image(team, "logo")
    if logo:
        return f'<div class="studio-logo"><img src="{escape(logo)}" alt="Logo"></div>'
    return '<div class="studio-logo"><i class="studio-icon fallback-icon" data-lucide="trophy"></i></div>'


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------


def _section_header(ctx: RenderContext, element_id: str, title: str, label: str, page_label: str) -> str:
    return render_leaf(
        ctx,
        element_id,
        default_text=title,
        label=label,
        tag="h3",
        base_class="text-[10px] font-black uppercase text-slate-400",
        wrapper_class="mb-3 px-1",
        path=f"{page_label} > {label}",
    )


def render_home(ctx: RenderContext) -> str:
    parts = [_section_header(ctx, "home_header", "Next match", "Home title", "Home")]
    if ctx.omits("next_match_card"):
        return "".join(parts)
    team_label = render_leaf(
        ctx,
        "home_team_label",
        default_text=ctx.team.get("name") or "",
        label="Home team",
        base_class="text-xs font-bold",
        path="Home > Next match > Home team",
    )
    parts.append(render_card(ctx, "next_match_card", team_label, label="Next match card", path="Home > Next match"))
    return "".join(parts)


def render_roster(ctx: RenderContext) -> str:
    parts = [_section_header(ctx, "roster_header_main", "Your Squad", "Roster title", "Roster")]
    for player in ROSTER:
        pid = player["id"]
        if ctx.omits(f"player_{pid}"):
            continue
        name = render_leaf(
            ctx,
            f"player_name_{pid}",
            default_text=player["name"],
            label=f"Player name #{player['number']}",
            base_class="font-bold text-sm",
            path=f"Roster > Player {pid} > Name",
        )
        role = f'<div class="text-[10px] text-slate-500 uppercase">{escape(player["role"])}</div>'
        number = f'<div class="text-xl font-black text-slate-200">#{player["number"]}</div>'
        parts.append(
            render_card(
                ctx,
                f"player_{pid}",
                name + role + number,
                label=f"Player card {pid}",
                base_class="flex items-center gap-4 p-3",
                path=f"Roster > Player {pid}",
            )
        )
    return "".join(parts)


def render_shop(ctx: RenderContext) -> str:
    parts = [_section_header(ctx, "shop_header", "Official Store", "Shop title", "Shop")]
    parts.append('<div class="grid grid-cols-2 gap-3 mt-4">')
    for i, product in enumerate(SHOP_PRODUCTS):
        if ctx.omits(f"shop_item_{i}"):
            continue
        add = render_icon_leaf(
            ctx,
            f"shop_add_{i}",
            default_icon="plus",
            label="Add to cart",
            base_class="absolute bottom-2 right-2 w-8 h-8 rounded-full bg-white/90 text-slate-900",
            path=f"Shop > Product {i} > Add to cart",
            action="add_to_cart",
        )
        title = render_leaf(
            ctx,
            f"shop_title_{i}",
            default_text=product["name"],
            label="Product name",
            base_class="text-xs font-bold leading-tight",
            path=f"Shop > Product {i} > Name",
        )
        price = render_leaf(
            ctx,
            f"shop_price_{i}",
            default_text=product["price"],
            label="Product price",
            base_class="mt-2 font-black text-blue-600",
            path=f"Shop > Product {i} > Price",
        )
        body = f'<div class="aspect-square relative">{add}</div><div class="p-3">{title}{price}</div>'
        parts.append(
            render_card(
                ctx,
                f"shop_item_{i}",
                body,
                label=f"Product {i}",
                base_class="p-0 overflow-hidden relative",
                path=f"Shop > Product {i}",
            )
        )
    parts.append("</div>")
    return "".join(parts)


_SCREENS = {
    "home": render_home,
    "roster": render_roster,
    "shop": render_shop,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def render_preview(
    theme: dict[str, Any],
    team: dict[str, Any] | None = None,
    page: str = "home",
    *,
    inspector_active: bool = False,
    selected_id: str | None = None,
    propagator: HeaderHeightPropagator | None = None,
) -> RenderResult:
    """
    Render the simulated phone for one page.
    Without a propagator the header height is the fresh prediction for the
    theme and page.
    """
    if propagator is None:
        propagator = HeaderHeightPropagator()
        propagator.on_config_change(theme, page)

    ctx = RenderContext(
        theme=theme,
        team=team or default_team(),
        inspector_active=inspector_active,
        selected_id=selected_id,
    )

    header = render_header(ctx, page, propagator.predicted)

    screen = _SCREENS.get(page)
    if screen is None:
        logger.debug("preview: no screen for page %r", page)
        body = ""
    else:
        body = screen(ctx)

    html = (
        f'<div class="studio-phone" data-page="{escape(page)}"'
        f'{" data-inspector" if inspector_active else ""}>'
        f"{header}"
        f'<main class="studio-screen px-4 pb-24" style="padding-top: {_px(propagator.content_top_padding)}">'
        f"{body}"
        f"</main>"
        f"</div>"
    )
    return RenderResult(html=html, boundaries=ctx.boundaries)


def _px(value: float) -> str:
    return f"{value:g}px"
