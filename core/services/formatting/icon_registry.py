"""Inline SVG icons that answers can reference with [ICON:name] tokens."""
from types import MappingProxyType
from typing import List

ICON_WRAPPER = '<span class="inline-block align-middle">{svg}</span>'

ICON_SVGS = MappingProxyType({
    "location": (
        '<svg xmlns="http://www.w3.org/2000/svg" class="inline-block w-5 h-5" viewBox="0 0 24 24">'
        '<path fill="currentColor" d="M12 2C8.13 2 5 5.13 5 9c0 5.25 7 13 7 13s7-7.75 7-13c0-3.87-3.13-7-7-7z'
        'm0 9.5c-1.38 0-2.5-1.12-2.5-2.5S10.62 6.5 12 6.5s2.5 1.12 2.5 2.5S13.38 11.5 12 11.5z"/></svg>'
    ),
    "phone": (
        '<svg xmlns="http://www.w3.org/2000/svg" class="inline-block w-5 h-5" fill="none" viewBox="0 0 24 24" '
        'stroke="currentColor"><path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
        'd="M2 6.5c1.5-2 4-3 6.5-2l2 2a1 1 0 010 1.4L9 10a12 12 0 005 5l2.1-1.5a1 1 0 011.4 0l2 2c1 2.5 0 5-2 6.5'
        '-.6.4-1.4.5-2.1.2C10.2 20.5 3.5 13.8 1.8 6.6c-.3-.7-.2-1.5.2-2.1z"/></svg>'
    ),
    "mobile": (
        '<svg xmlns="http://www.w3.org/2000/svg" class="inline-block w-5 h-5" viewBox="0 0 24 24">'
        '<path fill="currentColor" d="M15.5 1h-7a.5.5 0 00-.5.5v21a.5.5 0 00.5.5h7a.5.5 0 00.5-.5V1.5'
        'a.5.5 0 00-.5-.5zM12 22a1 1 0 110-2 1 1 0 010 2z"/></svg>'
    ),
    "email": (
        '<svg xmlns="http://www.w3.org/2000/svg" class="inline-block w-5 h-5" fill="none" viewBox="0 0 24 24" '
        'stroke="currentColor"><path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
        'd="M3 5h18a2 2 0 012 2v10a2 2 0 01-2 2H3a2 2 0 01-2-2V7a2 2 0 012-2z" />'
        '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M3 7l9 6 9-6" /></svg>'
    ),
})


def icon_names() -> List[str]:
    return sorted(ICON_SVGS)


def get_icon_svg(name: str) -> str:
    """Look up an icon by name (surrounding whitespace ignored); unknown names give ""."""
    return ICON_SVGS.get(name.strip(), "")


def render_icon(name: str) -> str:
    """Wrapped inline SVG for a known icon, or "" for an unknown one."""
    svg = get_icon_svg(name)
    if not svg:
        return ""
    return ICON_WRAPPER.format(svg=svg)
