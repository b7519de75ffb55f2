"""Built-in canonical class order.

The order follows the sequence in which a Tailwind-style stylesheet emits its
utilities: plugin by plugin, and within a plugin value by value. The list is
generated once at import time from the family tables below and frozen into
:data:`SORTED_CLASSES`.
"""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["SORTED_CLASSES", "generate_classes"]


# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------

SPACING = (
    "0", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8",
    "9", "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40",
    "44", "48", "52", "56", "60", "64", "72", "80", "96", "px",
)

FRACTIONS = (
    "1/2", "1/3", "2/3", "1/4", "2/4", "3/4", "1/5", "2/5", "3/5", "4/5",
    "1/6", "2/6", "3/6", "4/6", "5/6",
)

WIDTH_FRACTIONS = FRACTIONS + (
    "1/12", "2/12", "3/12", "4/12", "5/12", "6/12", "7/12", "8/12", "9/12",
    "10/12", "11/12",
)

OPACITY = ("0", "5", "10", "20", "25", "30", "40", "50", "60", "70", "75",
           "80", "90", "95", "100")

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")

PALETTE = ("gray", "red", "yellow", "green", "blue", "indigo", "purple", "pink")

SPECIAL_COLORS = ("transparent", "current", "black", "white")

BREAKPOINT_WIDTHS = ("sm", "md", "lg", "xl", "2xl")

TYPE_SCALE = ("xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl",
              "6xl", "7xl", "8xl", "9xl")

RADII = ("none", "sm", "", "md", "lg", "xl", "2xl", "3xl", "full")

SIDES = ("t", "r", "b", "l")

CORNERS = ("tl", "tr", "br", "bl")

BORDER_WIDTHS = ("0", "2", "4", "8", "")

GRID_SPANS = tuple(str(n) for n in range(1, 13))

GRID_LINES = tuple(str(n) for n in range(1, 14))


def _colors() -> tuple[str, ...]:
    return SPECIAL_COLORS + tuple(
        f"{hue}-{shade}" for hue in PALETTE for shade in SHADES
    )


COLORS = _colors()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _join(prefix: str, value: str) -> str:
    """Join a utility prefix and value; an empty value yields the bare prefix."""
    return f"{prefix}-{value}" if value else prefix


def _scaled(prefix: str, values: Iterable[str]) -> Iterator[str]:
    for value in values:
        yield _join(prefix, value)


def _negated(prefix: str, values: Iterable[str]) -> Iterator[str]:
    for value in values:
        if value != "0":
            yield f"-{prefix}-{value}"


def _axis_scaled(prefixes: Iterable[str], values: Iterable[str]) -> Iterator[str]:
    """Interleave several prefixes value by value (``py-0 px-0 py-1 px-1``)."""
    prefixes = tuple(prefixes)
    for value in values:
        for prefix in prefixes:
            yield _join(prefix, value)


def _spacing_family(short: str, *, negative: bool, extra: tuple[str, ...] = ()) -> Iterator[str]:
    """Padding/margin style families: all sides, axes, then single sides."""
    values = SPACING + extra
    groups = ((short,), (f"{short}y", f"{short}x"), tuple(f"{short}{s}" for s in SIDES))
    for prefixes in groups:
        yield from _axis_scaled(prefixes, values)
        if negative:
            for value in SPACING:
                if value == "0":
                    continue
                for prefix in prefixes:
                    yield f"-{prefix}-{value}"


# ---------------------------------------------------------------------------
# Plugins, in stylesheet emission order
# ---------------------------------------------------------------------------


def _layout() -> Iterator[str]:
    yield "container"
    for axis in ("y", "x"):
        yield from _scaled(f"space-{axis}", SPACING)
        yield from _negated(f"space-{axis}", SPACING)
    yield "space-y-reverse"
    yield "space-x-reverse"
    for axis in ("y", "x"):
        yield from _scaled(f"divide-{axis}", BORDER_WIDTHS)
    yield "divide-y-reverse"
    yield "divide-x-reverse"
    yield from _scaled("divide", COLORS)
    yield from ("divide-solid", "divide-dashed", "divide-dotted",
                "divide-double", "divide-none")
    yield from _scaled("divide-opacity", OPACITY)
    yield from ("sr-only", "not-sr-only")
    yield "appearance-none"


def _backgrounds() -> Iterator[str]:
    yield from ("bg-fixed", "bg-local", "bg-scroll")
    yield from ("bg-clip-border", "bg-clip-padding", "bg-clip-content",
                "bg-clip-text")
    yield from _scaled("bg", COLORS)
    yield "bg-none"
    yield from (f"bg-gradient-to-{d}" for d in
                ("t", "tr", "r", "br", "b", "bl", "l", "tl"))
    for stop in ("from", "via", "to"):
        yield from _scaled(stop, COLORS)
    yield from _scaled("bg-opacity", OPACITY)
    yield from ("bg-bottom", "bg-center", "bg-left", "bg-left-bottom",
                "bg-left-top", "bg-right", "bg-right-bottom", "bg-right-top",
                "bg-top")
    yield from ("bg-repeat", "bg-no-repeat", "bg-repeat-x", "bg-repeat-y",
                "bg-repeat-round", "bg-repeat-space")
    yield from ("bg-auto", "bg-cover", "bg-contain")


def _borders() -> Iterator[str]:
    yield from ("border-collapse", "border-separate")
    yield from _scaled("border", COLORS)
    yield from _scaled("border-opacity", OPACITY)
    yield from _scaled("rounded", RADII)
    for side in SIDES:
        yield from _scaled(f"rounded-{side}", RADII)
    for corner in CORNERS:
        yield from _scaled(f"rounded-{corner}", RADII)
    yield from ("border-solid", "border-dashed", "border-dotted",
                "border-double", "border-none")
    yield from _scaled("border", BORDER_WIDTHS)
    for side in SIDES:
        yield from _scaled(f"border-{side}", BORDER_WIDTHS)
    yield from ("box-border", "box-content")
    yield from ("cursor-auto", "cursor-default", "cursor-pointer",
                "cursor-wait", "cursor-text", "cursor-move", "cursor-help",
                "cursor-not-allowed")


def _display() -> Iterator[str]:
    yield from (
        "block", "inline-block", "inline", "flex", "inline-flex", "table",
        "inline-table", "table-caption", "table-cell", "table-column",
        "table-column-group", "table-footer-group", "table-header-group",
        "table-row-group", "table-row", "flow-root", "grid", "inline-grid",
        "contents", "list-item", "hidden",
    )


def _flexbox() -> Iterator[str]:
    yield from ("flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse")
    yield from ("flex-wrap", "flex-wrap-reverse", "flex-nowrap")
    yield from ("place-items-start", "place-items-end", "place-items-center",
                "place-items-stretch")
    yield from ("place-content-center", "place-content-start",
                "place-content-end", "place-content-between",
                "place-content-around", "place-content-evenly",
                "place-content-stretch")
    yield from ("place-self-auto", "place-self-start", "place-self-end",
                "place-self-center", "place-self-stretch")
    yield from ("items-start", "items-end", "items-center", "items-baseline",
                "items-stretch")
    yield from ("content-center", "content-start", "content-end",
                "content-between", "content-around", "content-evenly")
    yield from ("self-auto", "self-start", "self-end", "self-center",
                "self-stretch")
    yield from ("justify-items-start", "justify-items-end",
                "justify-items-center", "justify-items-stretch")
    yield from ("justify-start", "justify-end", "justify-center",
                "justify-between", "justify-around", "justify-evenly")
    yield from ("justify-self-auto", "justify-self-start", "justify-self-end",
                "justify-self-center", "justify-self-stretch")
    yield from ("flex-1", "flex-auto", "flex-initial", "flex-none")
    yield from ("flex-grow-0", "flex-grow")
    yield from ("flex-shrink-0", "flex-shrink")
    yield from _scaled("order", GRID_SPANS)
    yield from ("order-first", "order-last", "order-none")


def _floats_and_type() -> Iterator[str]:
    yield from ("float-right", "float-left", "float-none")
    yield from ("clear-left", "clear-right", "clear-both", "clear-none")
    yield from ("font-sans", "font-serif", "font-mono")
    yield from ("font-thin", "font-extralight", "font-light", "font-normal",
                "font-medium", "font-semibold", "font-bold", "font-extrabold",
                "font-black")


def _sizing(prefix: str, extra: tuple[str, ...]) -> Iterator[str]:
    yield from _scaled(prefix, SPACING + ("auto",) + extra)


def _heights_and_text() -> Iterator[str]:
    yield from _sizing("h", FRACTIONS + ("full", "screen"))
    yield from _scaled("text", TYPE_SCALE)
    yield from _scaled("leading", ("3", "4", "5", "6", "7", "8", "9", "10"))
    yield from ("leading-none", "leading-tight", "leading-snug",
                "leading-normal", "leading-relaxed", "leading-loose")
    yield from ("list-inside", "list-outside")
    yield from ("list-none", "list-disc", "list-decimal")


def _margins_and_sizes() -> Iterator[str]:
    yield from _spacing_family("m", negative=True, extra=("auto",))
    yield from _scaled("max-h", SPACING + ("full", "screen"))
    yield from _scaled("max-w", ("0", "none", "xs", "sm", "md", "lg", "xl",
                                 "2xl", "3xl", "4xl", "5xl", "6xl", "7xl",
                                 "full", "min", "max", "prose"))
    yield from (f"max-w-screen-{bp}" for bp in BREAKPOINT_WIDTHS)
    yield from ("min-h-0", "min-h-full", "min-h-screen")
    yield from ("min-w-0", "min-w-full", "min-w-min", "min-w-max")
    yield from ("object-contain", "object-cover", "object-fill", "object-none",
                "object-scale-down")
    yield from ("object-bottom", "object-center", "object-left",
                "object-left-bottom", "object-left-top", "object-right",
                "object-right-bottom", "object-right-top", "object-top")
    yield from _scaled("opacity", OPACITY)
    yield from ("outline-none", "outline-white", "outline-black")
    for axis in ("", "x", "y"):
        prefix = f"overflow-{axis}" if axis else "overflow"
        yield from _scaled(prefix, ("auto", "hidden", "visible", "scroll"))
    yield from ("overscroll-auto", "overscroll-contain", "overscroll-none",
                "overscroll-y-auto", "overscroll-y-contain",
                "overscroll-y-none", "overscroll-x-auto",
                "overscroll-x-contain", "overscroll-x-none")


def _padding_to_position() -> Iterator[str]:
    yield from _spacing_family("p", negative=False)
    yield from _scaled("placeholder", COLORS)
    yield from _scaled("placeholder-opacity", OPACITY)
    yield from ("pointer-events-none", "pointer-events-auto")
    yield from ("static", "fixed", "absolute", "relative", "sticky")
    inset_values = SPACING + ("auto",) + FRACTIONS[:9] + ("full",)
    yield from _scaled("inset", inset_values)
    yield from _negated("inset", SPACING)
    yield from _axis_scaled(("inset-y", "inset-x"), inset_values)
    yield from _axis_scaled(("top", "right", "bottom", "left"), inset_values)
    for value in SPACING:
        if value == "0":
            continue
        for side in ("top", "right", "bottom", "left"):
            yield f"-{side}-{value}"
    yield from ("resize-none", "resize-y", "resize-x", "resize")


def _effects_and_text() -> Iterator[str]:
    yield from _scaled("shadow", ("sm", "", "md", "lg", "xl", "2xl", "inner",
                                  "none"))
    yield from _scaled("ring", ("0", "1", "2", "4", "8", "", "inset"))
    yield from _scaled("ring", COLORS)
    yield from _scaled("ring-opacity", OPACITY)
    yield from _scaled("ring-offset", ("0", "1", "2", "4", "8"))
    yield from _scaled("ring-offset", COLORS)
    yield "fill-current"
    yield "stroke-current"
    yield from ("stroke-0", "stroke-1", "stroke-2")
    yield from ("table-auto", "table-fixed")
    yield from ("text-left", "text-center", "text-right", "text-justify")
    yield from _scaled("text", COLORS)
    yield from _scaled("text-opacity", OPACITY)
    yield from ("underline", "line-through", "no-underline")
    yield from ("uppercase", "lowercase", "capitalize", "normal-case")
    yield from ("antialiased", "subpixel-antialiased")
    yield from ("italic", "not-italic")
    yield from ("normal-nums", "ordinal", "slashed-zero", "lining-nums",
                "oldstyle-nums", "proportional-nums", "tabular-nums",
                "diagonal-fractions", "stacked-fractions")
    yield from ("tracking-tighter", "tracking-tight", "tracking-normal",
                "tracking-wide", "tracking-wider", "tracking-widest")
    yield from ("select-none", "select-text", "select-all", "select-auto")
    yield from ("align-baseline", "align-top", "align-middle", "align-bottom",
                "align-text-top", "align-text-bottom")
    yield from ("visible", "invisible")
    yield from ("whitespace-normal", "whitespace-nowrap", "whitespace-pre",
                "whitespace-pre-line", "whitespace-pre-wrap")
    yield from ("break-normal", "break-words", "break-all", "truncate")


def _width_to_grid() -> Iterator[str]:
    yield from _sizing("w", WIDTH_FRACTIONS + ("full", "screen", "min", "max"))
    yield from _scaled("z", ("0", "10", "20", "30", "40", "50", "auto"))
    yield from _scaled("gap", SPACING)
    yield from _axis_scaled(("gap-y", "gap-x"), SPACING)
    yield from ("grid-flow-row", "grid-flow-col", "grid-flow-row-dense",
                "grid-flow-col-dense")
    yield from _scaled("grid-cols", GRID_SPANS + ("none",))
    yield "auto-cols-auto"
    yield from ("auto-cols-min", "auto-cols-max", "auto-cols-fr")
    yield "col-auto"
    yield from _scaled("col-span", GRID_SPANS + ("full",))
    yield from _scaled("col-start", GRID_LINES + ("auto",))
    yield from _scaled("col-end", GRID_LINES + ("auto",))
    yield from _scaled("grid-rows", tuple(str(n) for n in range(1, 7)) + ("none",))
    yield from ("auto-rows-auto", "auto-rows-min", "auto-rows-max",
                "auto-rows-fr")
    yield "row-auto"
    yield from _scaled("row-span", tuple(str(n) for n in range(1, 7)) + ("full",))
    yield from _scaled("row-start", tuple(str(n) for n in range(1, 8)) + ("auto",))
    yield from _scaled("row-end", tuple(str(n) for n in range(1, 8)) + ("auto",))


def _transforms_and_motion() -> Iterator[str]:
    yield from ("transform", "transform-gpu", "transform-none")
    yield from ("origin-center", "origin-top", "origin-top-right",
                "origin-right", "origin-bottom-right", "origin-bottom",
                "origin-bottom-left", "origin-left", "origin-top-left")
    scales = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150")
    for prefix in ("scale", "scale-x", "scale-y"):
        yield from _scaled(prefix, scales)
    degrees = ("0", "1", "2", "3", "6", "12", "45", "90", "180")
    yield from _scaled("rotate", degrees)
    yield from _negated("rotate", degrees)
    translate_values = SPACING + FRACTIONS[:9] + ("full",)
    for axis in ("x", "y"):
        yield from _scaled(f"translate-{axis}", translate_values)
        yield from _negated(f"translate-{axis}", translate_values)
    skews = ("0", "1", "2", "3", "6", "12")
    for axis in ("x", "y"):
        yield from _scaled(f"skew-{axis}", skews)
        yield from _negated(f"skew-{axis}", skews)
    yield from ("transition-none", "transition-all", "transition",
                "transition-colors", "transition-opacity",
                "transition-shadow", "transition-transform")
    yield from ("ease-linear", "ease-in", "ease-out", "ease-in-out")
    durations = ("75", "100", "150", "200", "300", "500", "700", "1000")
    yield from _scaled("duration", durations)
    yield from _scaled("delay", durations)
    yield from ("animate-none", "animate-spin", "animate-ping",
                "animate-pulse", "animate-bounce")


_PLUGINS = (
    _layout,
    _backgrounds,
    _borders,
    _display,
    _flexbox,
    _floats_and_type,
    _heights_and_text,
    _margins_and_sizes,
    _padding_to_position,
    _effects_and_text,
    _width_to_grid,
    _transforms_and_motion,
)


def generate_classes() -> tuple[str, ...]:
    """Return the canonical class order, first occurrence winning on repeats."""
    seen: dict[str, None] = {}
    for plugin in _PLUGINS:
        for name in plugin():
            seen.setdefault(name, None)
    return tuple(seen)


SORTED_CLASSES: tuple[str, ...] = generate_classes()
