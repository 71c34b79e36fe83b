from __future__ import annotations

"""
Icon Glyph Table.

Maps icon identifiers to the inner SVG markup rendered inside a 24x24
viewBox. Two identifiers are reserved: 'seti:folder' for directories and
'seti:default' for files without a more specific match.
"""

from typing import Dict

_DOC = '<path d="M6 2h8l6 6v14H6z" fill="none" stroke="currentColor" stroke-width="1.5"/>'
_CODE = '<path d="M8 7l-5 5 5 5M16 7l5 5-5 5" fill="none" stroke="currentColor" stroke-width="2"/>'
_GEAR = (
    '<circle cx="12" cy="12" r="3"/>'
    '<path d="M12 2v3M12 19v3M2 12h3M19 12h3M4.9 4.9l2.1 2.1M17 17l2.1 2.1'
    'M4.9 19.1L7 17M17 7l2.1-2.1" stroke="currentColor" stroke-width="2"/>'
)
_BRACES = (
    '<path d="M9 4H7a2 2 0 0 0-2 2v4l-2 2 2 2v4a2 2 0 0 0 2 2h2'
    'M15 4h2a2 2 0 0 1 2 2v4l2 2-2 2v4a2 2 0 0 1-2 2h-2" '
    'fill="none" stroke="currentColor" stroke-width="1.5"/>'
)
_PICTURE = '<path d="M3 5h18v14H3zM3 16l5-5 4 4 3-3 6 6" fill="none" stroke="currentColor" stroke-width="1.5"/>'
_BOX = '<path d="M3 7l9-4 9 4v10l-9 4-9-4zM3 7l9 4 9-4M12 11v10" fill="none" stroke="currentColor" stroke-width="1.5"/>'
_TERMINAL = '<path d="M4 6l6 6-6 6M12 18h8" fill="none" stroke="currentColor" stroke-width="2"/>'
_LETTER = (
    '<path d="M4 4h16v16H4z" fill="none" stroke="currentColor" stroke-width="1.5"/>'
    '<path d="{glyph}" fill="currentColor"/>'
)


def _letter(glyph: str) -> str:
    return _LETTER.format(glyph=glyph)


Icons: Dict[str, str] = {
    "seti:folder": '<path d="M2 5h7l2 2h11v13H2z" fill="currentColor"/>',
    "seti:default": _DOC,
    "seti:license": '<path d="M6 3h12v18l-6-4-6 4z" fill="currentColor"/>',
    "seti:info": (
        '<circle cx="12" cy="12" r="10" fill="none" stroke="currentColor" stroke-width="2"/>'
        '<path d="M11 10h2v8h-2zM11 6h2v2h-2z" fill="currentColor"/>'
    ),
    "seti:clock": (
        '<circle cx="12" cy="12" r="10" fill="none" stroke="currentColor" stroke-width="2"/>'
        '<path d="M12 6v6l4 2" fill="none" stroke="currentColor" stroke-width="2"/>'
    ),
    "seti:markdown": (
        '<path d="M2 6h20v12H2zM5 15V9l3 3 3-3v6M16 9v6M14 13l2 2 2-2" '
        'fill="none" stroke="currentColor" stroke-width="1.5"/>'
    ),
    "seti:json": _BRACES,
    "seti:yml": _letter("M8 7l4 5 4-5M12 12v5"),
    "seti:xml": _CODE,
    "seti:html": _CODE,
    "seti:svg": _CODE,
    "seti:css": _letter("M16 8h-6v8h6"),
    "seti:sass": _letter("M15 8h-5v4h5v4h-5"),
    "seti:less": _letter("M9 7v10h6"),
    "seti:javascript": _letter("M14 7v8a2 2 0 0 1-4 0"),
    "seti:typescript": _letter("M7 8h8M11 8v9"),
    "seti:tsconfig": _GEAR,
    "seti:react": (
        '<ellipse cx="12" cy="12" rx="10" ry="4" fill="none" stroke="currentColor"/>'
        '<ellipse cx="12" cy="12" rx="10" ry="4" transform="rotate(60 12 12)" fill="none" stroke="currentColor"/>'
        '<ellipse cx="12" cy="12" rx="10" ry="4" transform="rotate(120 12 12)" fill="none" stroke="currentColor"/>'
    ),
    "seti:vue": '<path d="M2 4h4l6 10 6-10h4L12 21z" fill="currentColor"/>',
    "seti:svelte": _letter("M15 8h-5v4h5v4H9"),
    "seti:astro": '<path d="M9 3h6l5 14-4-2-4 6-4-6-4 2z" fill="currentColor"/>',
    "seti:vite": '<path d="M2 4l10 17L22 4l-10 3z" fill="currentColor"/>',
    "seti:python": (
        '<path d="M12 2c-5 0-5 2-5 4v2h5v1H5c-2 0-3 2-3 5s1 5 3 5h2v-3c0-2 2-4 4-4h5'
        'c2 0 3-1 3-3V6c0-2-2-4-7-4z" fill="currentColor"/>'
    ),
    "seti:ruby": '<path d="M6 3h12l4 6-10 12L2 9z" fill="currentColor"/>',
    "seti:go": _letter("M15 9a4 4 0 1 0 0 6v-3h-3"),
    "seti:rust": _GEAR,
    "seti:java": _letter("M13 7v7a3 3 0 0 1-6 0"),
    "seti:kotlin": '<path d="M3 3h18L12 12l9 9H3z" fill="currentColor"/>',
    "seti:swift": (
        '<path d="M4 14c5 4 11 4 16-2-3 2-8 1-12-4 3 2 6 3 8 2-3-2-6-6-7-8 4 5 9 8 11 7" '
        'fill="currentColor"/>'
    ),
    "seti:c": _letter("M15 9a4 4 0 1 0 0 6"),
    "seti:cpp": _letter("M12 9a3 3 0 1 0 0 6M15 12h4M17 10v4"),
    "seti:c-sharp": _letter("M12 9a3 3 0 1 0 0 6M15 10h4M15 14h4"),
    "seti:php": '<ellipse cx="12" cy="12" rx="10" ry="6" fill="none" stroke="currentColor" stroke-width="1.5"/>',
    "seti:shell": _TERMINAL,
    "seti:powershell": _TERMINAL,
    "seti:makefile": _GEAR,
    "seti:config": _GEAR,
    "seti:editorconfig": _GEAR,
    "seti:eslint": _GEAR,
    "seti:docker": (
        '<path d="M2 12h18c1-3 3-3 3-3-1-1-3-1-3-1M4 12v3c0 3 3 5 8 5s8-3 9-8" '
        'fill="none" stroke="currentColor" stroke-width="1.5"/>'
    ),
    "seti:git": (
        '<path d="M12 2l10 10-10 10L2 12z" fill="none" stroke="currentColor" stroke-width="1.5"/>'
        '<circle cx="12" cy="12" r="2"/>'
    ),
    "seti:npm": _BOX,
    "seti:yarn": _BOX,
    "seti:heroku": _BOX,
    "seti:grunt": _BOX,
    "seti:gulp": _BOX,
    "seti:webpack": _BOX,
    "seti:rollup": _BOX,
    "seti:zip": _BOX,
    "seti:lock": (
        '<path d="M6 10h12v11H6zM8 10V7a4 4 0 0 1 8 0v3" '
        'fill="none" stroke="currentColor" stroke-width="1.5"/>'
    ),
    "seti:db": (
        '<ellipse cx="12" cy="5" rx="8" ry="3" fill="none" stroke="currentColor"/>'
        '<path d="M4 5v14c0 2 4 3 8 3s8-1 8-3V5" fill="none" stroke="currentColor"/>'
    ),
    "seti:image": _PICTURE,
    "seti:favicon": '<path d="M12 2l3 7h7l-6 4 2 8-6-5-6 5 2-8-6-4h7z" fill="currentColor"/>',
    "seti:pdf": _letter("M8 17V7h4a3 3 0 0 1 0 6H8"),
}
